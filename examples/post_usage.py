"""Enum attributes on a plain class.

Demonstrates:
  * Loading enums lazily from ``examples/enums.yml``
  * Single and flags attributes with coercion and passthrough
  * Validation messages and flat storage serialization
  * Alternate formats and mnemonic predicates

Run:
    python examples/post_usage.py
"""

from __future__ import annotations

from pathlib import Path

from enum_x import Registry
from enum_x.attributes import EnumAttribute, validate_enums

registry = Registry(load_paths=[Path(__file__).with_name("enums.yml")])


class Post:
    status = EnumAttribute(registry=registry, mnemonics=True)
    roles = EnumAttribute(registry=registry, flags=True)


def main():
    post = Post()
    post.status = "returned"
    post.roles = ["admin", "editor"]

    print("status:", post.status, "legacy:", registry.kinds[post.status].format("legacy"))
    print("is_draft:", post.is_draft(), "is_returned:", post.is_returned())
    print("roles:", post.roles)
    print("issues:", validate_enums(post))
    print("stored roles:", vars(Post)["roles"].serializer().dump(post.roles))


if __name__ == "__main__":
    main()
