"""
D2 Domains - TLD and root domain resolution

Resolves the recognized suffix and registered domain of hostnames and URLs
for grouping report entries by origin.
"""

from .resolver import DomainResolver, get_default_resolver, get_root_domain, get_tld
from .suffix_table import SuffixTable, get_suffix_table, load_suffix_table

__all__ = [
    "DomainResolver",
    "get_default_resolver",
    "get_root_domain",
    "get_tld",
    "SuffixTable",
    "get_suffix_table",
    "load_suffix_table",
]
