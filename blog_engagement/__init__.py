"""
django-blog-engagement - Publication state and reader engagement for Django blogs.

Features:
- Draft/published workflow with completeness checks on publish
- Atomic read and like counters for blogs and their authors
- Like ledger that doubles as the author's notification feed
- Bearer-token JSON API for authoring, reading and liking
- Latest and trending listings of published blogs
"""

__version__ = "0.1.0"
__author__ = "Nestor Wheelock"
