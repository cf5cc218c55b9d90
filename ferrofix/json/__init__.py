"""Configuration for the FIX JSON encoding."""