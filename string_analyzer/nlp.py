import re
from typing import Any, Callable, Dict, List, Tuple

from string_analyzer.errors import Unparseable
from string_analyzer.schemas import FilterSet

FilterBuilder = Callable[[re.Match], Dict[str, Any]]

# Each rule is checked on its own against the lowercased query; the first
# occurrence of a pattern wins. Add a phrase by adding a rule.
RULES: List[Tuple[re.Pattern, FilterBuilder]] = [
    (re.compile(r"palindrom(?:e|ic)"), lambda m: {"is_palindrome": True}),
    (re.compile(r"single word"), lambda m: {"word_count": 1}),
    (re.compile(r"longer than (\d+)"), lambda m: {"min_length": int(m.group(1)) + 1}),
    (re.compile(r"containing the letter (\S)"), lambda m: {"contains_character": m.group(1)}),
]


def parse_natural_language_query(query: str) -> Dict[str, Any]:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    """
    text = query.lower()
    filters: Dict[str, Any] = {}

    for pattern, build in RULES:
        match = pattern.search(text)
        if match:
            try:
                filters.update(build(match))
            except ValueError:
                raise Unparseable(f"Could not interpret '{match.group(0)[:40]}'")

    return filters


def translate(query: str) -> FilterSet:
    """Translate a query into a FilterSet, or raise Unparseable"""
    filters = parse_natural_language_query(query)
    if not filters:
        raise Unparseable("Unable to parse natural language query")
    return FilterSet(**filters)
