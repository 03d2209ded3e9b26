"""Domain-level rules.

This package contains logic that defines *what* the rules are (for example
how an exception payload becomes an error message), independent from *where*
they are applied (filters, handlers, routers).
"""
