"""Simple Open Framing Header (SOFH) frames and their errors."""