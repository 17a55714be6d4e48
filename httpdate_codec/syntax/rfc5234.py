"""
Regex for ABNF

The subset of the core ABNF rules in RFC5234 that HTTP dates are built from:

  https://tools.ietf.org/html/rfc5234#appendix-B.1

They should be processed with re.VERBOSE.
"""


# DIGIT          =  %x30-39
#                     ; 0-9

DIGIT = r"[\x30-\x39]"

# SP             =  %x20

SP = r"[\x20]"
