"""Session-layer helpers: sequence numbers and standard reject texts."""