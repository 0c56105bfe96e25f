"""Team name normalization.

Maps colloquial names, abbreviations and mascots to the canonical school
names the CFBD API expects. Unknown names pass through untouched so any
school the API knows can still be queried by its exact name.
"""

from types import MappingProxyType

# Lowercase alias -> canonical CFBD school name
TEAM_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "oklahoma": "Oklahoma",
        "ou": "Oklahoma",
        "sooners": "Oklahoma",
        "texas": "Texas",
        "longhorns": "Texas",
        "alabama": "Alabama",
        "crimson tide": "Alabama",
        "georgia": "Georgia",
        "bulldogs": "Georgia",
        "ohio state": "Ohio State",
        "buckeyes": "Ohio State",
        "michigan": "Michigan",
        "wolverines": "Michigan",
    }
)


def normalize_team_name(raw_name: str) -> str:
    """Return the canonical CFBD name for a team.

    Args:
        raw_name: Team name as typed by the caller (e.g. "OU", "sooners").

    Returns:
        The canonical name if the alias is known, otherwise the input with
        surrounding whitespace removed.

    Examples:
        >>> normalize_team_name("Sooners")
        'Oklahoma'
        >>> normalize_team_name("Texas A&M")
        'Texas A&M'
    """
    name = raw_name.strip()
    return TEAM_ALIASES.get(name.lower(), name)
