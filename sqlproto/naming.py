"""English inflection and case conversion for generated names."""

from __future__ import annotations

import re
from typing import NamedTuple


class _Rule(NamedTuple):
    pattern: re.Pattern
    replace: str


_PLURAL_RULES = [
    ("([a-z])$", "${1}s"),
    ("s$", "s"),
    ("^(ax|test)is$", "${1}es"),
    ("(octop|vir)us$", "${1}i"),
    ("(octop|vir)i$", "${1}i"),
    ("(alias|status|campus)$", "${1}es"),
    ("(bu)s$", "${1}ses"),
    ("(buffal|tomat)o$", "${1}oes"),
    ("([ti])um$", "${1}a"),
    ("([ti])a$", "${1}a"),
    ("sis$", "ses"),
    ("(?:([^f])fe|([lr])f)$", "${1}${2}ves"),
    ("(hive)$", "${1}s"),
    ("([^aeiouy]|qu)y$", "${1}ies"),
    ("(x|ch|ss|sh)$", "${1}es"),
    ("(matr|vert|ind)(?:ix|ex)$", "${1}ices"),
    ("^(m|l)ouse$", "${1}ice"),
    ("^(m|l)ice$", "${1}ice"),
    ("^(ox)$", "${1}en"),
    ("^(oxen)$", "${1}"),
    ("(quiz)$", "${1}zes"),
    ("(drive)$", "${1}s"),
]

_SINGULAR_RULES = [
    ("s$", ""),
    ("(ss)$", "${1}"),
    ("(n)ews$", "${1}ews"),
    ("([ti])a$", "${1}um"),
    (
        "((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$",
        "${1}sis",
    ),
    ("(^analy)(sis|ses)$", "${1}sis"),
    ("([^f])ves$", "${1}fe"),
    ("(hive)s$", "${1}"),
    ("(tive)s$", "${1}"),
    ("([lr])ves$", "${1}f"),
    ("([^aeiouy]|qu)ies$", "${1}y"),
    ("(s)eries$", "${1}eries"),
    ("(m)ovies$", "${1}ovie"),
    ("(c)ookies$", "${1}ookie"),
    ("(x|ch|ss|sh)es$", "${1}"),
    ("^(m|l)ice$", "${1}ouse"),
    ("(bus|campus)(es)?$", "${1}"),
    ("(o)es$", "${1}"),
    ("(shoe)s$", "${1}"),
    ("(cris|test)(is|es)$", "${1}is"),
    ("^(a)x[ie]s$", "${1}xis"),
    ("(octop|vir)(us|i)$", "${1}us"),
    ("(alias|status)(es)?$", "${1}"),
    ("^(ox)en", "${1}"),
    ("(vert|ind)ices$", "${1}ex"),
    ("(matr)ices$", "${1}ix"),
    ("(quiz)zes$", "${1}"),
    ("(database)s$", "${1}"),
]

_IRREGULARS = [
    ("person", "people"),
    ("man", "men"),
    ("child", "children"),
    ("sex", "sexes"),
    ("move", "moves"),
    ("mombie", "mombies"),
]

_UNCOUNTABLES = [
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
]


def _compile(pattern: str, flags: int = 0) -> re.Pattern:
    # "$" must match only at the very end of the text.
    if pattern.endswith("$"):
        pattern = pattern[:-1] + r"\Z"
    return re.compile(pattern, flags)


def _replacement(template: str) -> str:
    return re.sub(r"\$\{(\d+)\}", r"\\g<\1>", template)


def _title(word: str) -> str:
    return word[:1].upper() + word[1:]


def _build(rules: list[tuple[str, str]], irregulars: list[tuple[str, str]]) -> list[_Rule]:
    compiled = [
        _Rule(_compile("^(" + word + ")$", re.IGNORECASE), _replacement("${1}"))
        for word in _UNCOUNTABLES
    ]
    for source, target in reversed(irregulars):
        compiled.extend(
            [
                _Rule(_compile(source.upper() + "$"), target.upper()),
                _Rule(_compile(_title(source) + "$"), _title(target)),
                _Rule(_compile(source + "$"), target),
            ]
        )
    for find, replace in reversed(rules):
        compiled.extend(
            [
                _Rule(_compile(find.upper()), _replacement(replace.upper())),
                _Rule(_compile(find), _replacement(replace)),
                _Rule(_compile(find, re.IGNORECASE), _replacement(replace)),
            ]
        )
    return compiled


_PLURALS = _build(_PLURAL_RULES, _IRREGULARS)
_SINGULARS = _build(_SINGULAR_RULES, [(p, s) for s, p in _IRREGULARS])


def _inflect(rules: list[_Rule], word: str) -> str:
    for rule in rules:
        if rule.pattern.search(word):
            return rule.pattern.sub(rule.replace, word)
    return word


def plural(word: str) -> str:
    """Return the plural form of an English noun."""
    return _inflect(_PLURALS, word)


def singular(word: str) -> str:
    """Return the singular form of an English noun."""
    return _inflect(_SINGULARS, word)


_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+[0-9]*|[0-9]+")


def _words(text: str) -> list[str]:
    return _WORD_RE.findall(text)


def pascal_case(text: str) -> str:
    """Join the words of ``text`` as PascalCase."""
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(text))


def snake_case(text: str) -> str:
    """Join the words of ``text`` as snake_case."""
    return "_".join(w.lower() for w in _words(text))


def kebab_case(text: str) -> str:
    """Join the words of ``text`` as kebab-case."""
    return "-".join(w.lower() for w in _words(text))