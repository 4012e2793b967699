"""
Constants for the ksruntime binary stream layer.
"""

# Runtime API version expected by generated readers
VERSION = '0.4'

# Two's-complement sign bits per integer width
SIGN_MASK_8 = 1 << (8 - 1)
SIGN_MASK_16 = 1 << (16 - 1)
SIGN_MASK_32 = 1 << (32 - 1)
SIGN_MASK_64 = 1 << (64 - 1)

# Mode used by Stream.open
OPEN_MODE = 'rb'
