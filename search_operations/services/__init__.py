"""
Request Services

Chainable builders for engine endpoints. Each service resolves its path and
parameters with build_url() and executes with do().
"""

from .search_template import SearchTemplateService, SearchTemplateBody

__all__ = [
    "SearchTemplateService",
    "SearchTemplateBody",
]
