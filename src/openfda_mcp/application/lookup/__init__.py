"""Drug lookup use cases."""

from .service import DrugLookupService, field_query, quote_term

__all__ = ["DrugLookupService", "field_query", "quote_term"]
