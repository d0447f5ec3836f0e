# Lets pytest import peeklex from a plain checkout.
