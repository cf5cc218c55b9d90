"""Tag mnemonics for FIX 4.0, 4.1 and 4.2."""