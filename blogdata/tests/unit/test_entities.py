"""Unit tests for entity models."""

import json
import pytest
from datetime import datetime

from pydantic import ValidationError

from blogdata.models.entities import BlogPost, Category, Tag, EntityDescriptor


class TestEntities:
    """Test stored field names and parsing."""

    def test_category_json_uses_stored_names(self):
        """Test fields serialize with their capitalized names."""
        data = json.loads(Category(id="c1", name="Tech").to_json())
        assert data == {"Id": "c1", "Name": "Tech"}

    def test_post_json_layout(self):
        """Test a post's nested category and tags serialize the same way."""
        post = BlogPost(
            id="p1",
            title="Hello",
            text="Body",
            publish_date=datetime(2024, 1, 2, 3, 4, 5),
            category=Category(id="c1", name="Tech"),
            tags=[Tag(id="t1", name="python")],
        )

        data = json.loads(post.to_json())

        assert data == {
            "Id": "p1",
            "Title": "Hello",
            "Text": "Body",
            "PublishDate": "2024-01-02T03:04:05",
            "Category": {"Id": "c1", "Name": "Tech"},
            "Tags": [{"Id": "t1", "Name": "python"}],
        }

    def test_parse_by_stored_names(self):
        """Test a document written by another tool parses."""
        descriptor = EntityDescriptor("tags", Tag, "Tags")
        tag = descriptor.parse('{"Id": "t1", "Name": "python", "Extra": true}')
        assert tag == Tag(id="t1", name="python")

    def test_parse_rejects_non_object(self):
        """Test a JSON array is not a valid entity."""
        descriptor = EntityDescriptor("tags", Tag, "Tags")
        with pytest.raises(ValidationError):
            descriptor.parse('["t1"]')

    def test_new_entity_has_empty_id(self):
        """Test entities start without an ID until saved."""
        assert Category(name="Tech").id == ""

    def test_equality_is_by_value(self):
        """Test two entities with the same fields compare equal."""
        assert Tag(id="t1", name="a") == Tag(id="t1", name="a")
        assert Tag(id="t1", name="a") != Tag(id="t1", name="b")

    def test_file_name(self):
        """Test documents are named after the entity ID."""
        descriptor = EntityDescriptor("categories", Category, "Categories")
        assert descriptor.file_name("abc") == "abc.json"
