"""FIX message data structures."""