"""Cache key builders. Single place for key format."""

from rebac.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_RULE


def rule_cache_key(computed_tuple: str) -> str:
    """Cache key for a decision on a computed tuple: ruleCache:<computedTuple>.

    The tuple itself contains the separator ("user:1#read@doc:42"); the
    prefix is only ever stripped, never split, so this is unambiguous.

    Raises:
        ValueError: If computed_tuple is empty.
    """
    if not computed_tuple:
        raise ValueError("Cache key component 'computed_tuple' must be non-empty")
    return f"{CACHE_PREFIX_RULE}{CACHE_KEY_SEP}{computed_tuple}"
