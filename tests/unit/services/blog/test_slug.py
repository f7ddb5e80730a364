import re

import pytest

from inkpost.domain.services.blog.slug import make_blog_id, slugify_title


# Runs of separators collapse to a single hyphen ("Hello-World", never
# "Hello--World--"). See the slug decision in DESIGN.md before changing this.
@pytest.mark.parametrize(
    "title, expected",
    [
        ("Hello, World!", "Hello-World"),
        ("  spaced   out  ", "spaced-out"),
        ("C++ & Rust: a tale", "C-Rust-a-tale"),
        ("already-hyphenated", "already-hyphenated"),
        ("Ünïcode café", "n-code-caf"),
    ],
)
def test_slugify_title(title, expected):
    assert slugify_title(title) == expected


def test_blog_id_is_slug_plus_random_token():
    blog_id = make_blog_id("Hello, World!")
    assert re.fullmatch(r"Hello-World-[A-Za-z0-9_-]{22}", blog_id)


def test_blog_ids_differ_for_same_title():
    assert make_blog_id("Same title") != make_blog_id("Same title")


def test_title_without_alphanumerics_still_gets_an_id():
    blog_id = make_blog_id("!!!")
    assert re.fullmatch(r"[A-Za-z0-9_-]{22}", blog_id)
