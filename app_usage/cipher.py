# MIT License – Copyright (c) 2025 Menny Levinski

"""
ROT13 substitution used to obfuscate UserAssist value names.
"""

import codecs


def transform(text):
    """Apply ROT13 to ASCII letters; every other character passes through.

    The transform is its own inverse, so the same call decodes names read
    from the registry and re-encodes names to be written back.
    """
    return codecs.decode(text, "rot_13")
