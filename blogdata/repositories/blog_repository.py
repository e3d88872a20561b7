"""Blog repository - posts, categories and tags in one JSON data directory."""

import asyncio
from typing import Optional, List

from blogdata.config import StorageSettings
from blogdata.models.entities import (
    BlogPost,
    Category,
    Tag,
    EntityDescriptor,
)
from blogdata.repositories.json_repository import JsonFileRepository


class BlogRepository:
    """
    Data access for the blog content model.

    Holds one JsonFileRepository per entity type, each with its own cache.
    The async methods run the blocking file work in a worker thread; the
    typed repositories are also available as .posts, .categories and .tags
    for synchronous callers.

    Creating the folders is not done here, see config.ensure_directories().
    """

    def __init__(self, settings: StorageSettings):
        self.settings = settings
        self.posts = JsonFileRepository(
            settings.root,
            EntityDescriptor("blog posts", BlogPost, settings.blog_posts_folder),
        )
        self.categories = JsonFileRepository(
            settings.root,
            EntityDescriptor("categories", Category, settings.categories_folder),
        )
        self.tags = JsonFileRepository(
            settings.root,
            EntityDescriptor("tags", Tag, settings.tags_folder),
        )

    def collection(self, name: str) -> JsonFileRepository:
        """Look up a typed repository by name ('posts', 'categories' or 'tags')."""
        collections = {
            'posts': self.posts,
            'categories': self.categories,
            'tags': self.tags,
        }
        if name not in collections:
            raise ValueError(f"Unknown collection '{name}'. Valid: {sorted(collections)}")
        return collections[name]

    async def list_posts(self, number_of_posts: int = 10, start_index: int = 0) -> List[BlogPost]:
        """List all posts. Paging arguments are accepted but not applied yet."""
        return await asyncio.to_thread(self.posts.list)

    async def list_categories(self) -> List[Category]:
        return await asyncio.to_thread(self.categories.list)

    async def list_tags(self) -> List[Tag]:
        return await asyncio.to_thread(self.tags.list)

    async def get_post_by_id(self, id: str) -> Optional[BlogPost]:
        return await asyncio.to_thread(self.posts.get, id)

    async def get_category_by_id(self, id: str) -> Optional[Category]:
        return await asyncio.to_thread(self.categories.get, id)

    async def get_tag_by_id(self, id: str) -> Optional[Tag]:
        return await asyncio.to_thread(self.tags.get, id)

    async def count_posts(self) -> int:
        return await asyncio.to_thread(self.posts.count)

    async def save_post(self, post: BlogPost) -> BlogPost:
        return await asyncio.to_thread(self.posts.save, post)

    async def save_category(self, category: Category) -> Category:
        return await asyncio.to_thread(self.categories.save, category)

    async def save_tag(self, tag: Tag) -> Tag:
        return await asyncio.to_thread(self.tags.save, tag)

    async def delete_post(self, id: str) -> bool:
        return await asyncio.to_thread(self.posts.delete, id)

    async def delete_category(self, id: str) -> bool:
        return await asyncio.to_thread(self.categories.delete, id)

    async def delete_tag(self, id: str) -> bool:
        return await asyncio.to_thread(self.tags.delete, id)

    async def clear_cache(self) -> None:
        """Drop all three caches; the next call of any kind reloads from disk."""
        await asyncio.to_thread(self._clear_all)

    def _clear_all(self) -> None:
        self.posts.clear_cache()
        self.categories.clear_cache()
        self.tags.clear_cache()
