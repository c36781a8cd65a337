from gust.variants.expander import (
    ExpandedUtility,
    VariantExpander,
    make_transform,
    split_variants,
)

__all__ = ["ExpandedUtility", "VariantExpander", "make_transform", "split_variants"]
