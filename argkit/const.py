VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "argkit"
DESCRIPTION = "A typed command-line argument tokenizer"

# Words in this variable are prepended to the command line of the front end.
EXTRA_ARGS_ENV = "ARGKIT_EXTRA_ARGS"

# Largest value accepted for an unsigned integer option (64-bit word).
USIZE_MAX = 2**64 - 1
