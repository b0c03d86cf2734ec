"""
cryptohctl - command-line front end for the cryptoh library.
"""
