"""Blog data layer.

Posts, categories and tags stored as one JSON document per record, with a
lazily loaded write-through cache per entity type.

Usage:
    from blogdata import BlogRepository, load_settings

    repo = BlogRepository(load_settings())
    posts = await repo.list_posts()
"""

from .config import StorageSettings, load_settings, ensure_directories
from .models.entities import BlogPost, Category, Tag
from .repositories.blog_repository import BlogRepository

__all__ = [
    'BlogRepository',
    'StorageSettings',
    'load_settings',
    'ensure_directories',
    'BlogPost',
    'Category',
    'Tag',
]
