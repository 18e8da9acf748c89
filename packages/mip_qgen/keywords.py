from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

KeywordDictionary = Mapping[str, Tuple[str, ...]]


def build_keyword_dictionary(entries: Mapping[str, Iterable[str]]) -> KeywordDictionary:
    """
    Freeze a technology -> keywords table.
    Keys are lower-cased so lookups are case-insensitive; values keep their
    original spelling and order.
    """
    return MappingProxyType({
        tech.lower(): tuple(keywords) for tech, keywords in entries.items()
    })


def lookup_keywords(dictionary: KeywordDictionary, tech: str) -> List[str]:
    """Keywords for a technology, or an empty list when it is not mapped."""
    return list(dictionary.get(tech.lower(), ()))


DEFAULT_KEYWORDS: KeywordDictionary = build_keyword_dictionary({
    "react": ["components", "hooks", "state", "props", "virtual DOM", "jsx", "react router", "context", "redux"],
    "javascript": ["closures", "promises", "async/await", "prototypes", "ES6", "map", "filter", "arrow functions"],
    "frontend": ["responsive", "accessibility", "CSS", "HTML", "responsive design", "user experience", "UI/UX"],
    "backend": ["API", "database", "server", "middleware", "authentication", "authorization", "RESTful"],
    "node": ["express", "npm", "package.json", "middleware", "server", "modules"],
    "database": ["SQL", "NoSQL", "schema", "query", "index", "normalization", "MongoDB", "PostgreSQL"],
    "system design": ["scalability", "reliability", "availability", "performance", "security", "microservices"],
})
