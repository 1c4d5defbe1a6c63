"""
Domain Value Objects

The Uri value object lives in uri_builder.domain.value_objects.uri; this
package exports the building blocks it is made of.
"""

from .components import ComponentMap, empty_components, normalize_components
from .variants import VARIANT_RULES, UriVariant, VariantRules

__all__ = [
    "ComponentMap",
    "empty_components",
    "normalize_components",
    "UriVariant",
    "VariantRules",
    "VARIANT_RULES",
]
