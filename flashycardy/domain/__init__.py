"""Pure domain logic with no database or HTTP dependencies."""
