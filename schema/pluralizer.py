"""
Simplified English inflection for collection names.

Regular nouns only; irregular plurals (people, children, ...) are not known.
"""

VOWELS = "aeiou"
SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")

def pluralize(word: str) -> str:
    if word.endswith(SIBILANT_ENDINGS):
        return word + "es"
    if len(word) > 1 and word.endswith("y") and word[-2].lower() not in VOWELS:
        return word[:-1] + "ies"
    return word + "s"

def singularize(word: str) -> str:
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("es"):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word
