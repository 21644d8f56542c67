"""Tests for decoding upstream payloads."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from newsapp.schemas import Article, ArticlesPayload, UpstreamError

from conftest import make_article


def test_article_decodes_camel_case_fields():
    article = Article.model_validate(make_article(1))
    assert article.url_to_image == "https://example.com/images/1.jpg"
    assert article.published_at.year == 2024
    assert article.source.name == "The Verge"


def test_format_published_date():
    article = Article.model_validate(make_article(publishedAt="2024-03-07T23:59:00Z"))
    assert article.format_published_date() == "March 7, 2024"


@pytest.mark.parametrize("source_id", ["bbc-news", 42, None])
def test_source_id_is_opaque(source_id):
    article = Article.model_validate(make_article(source={"id": source_id, "name": "BBC"}))
    assert article.source.id == source_id


def test_null_text_fields_become_empty():
    article = Article.model_validate(make_article(author=None, description=None, urlToImage=None, content=None))
    assert article.author == ""
    assert article.description == ""
    assert article.url_to_image == ""
    assert article.content == ""


def test_article_is_immutable():
    article = Article.model_validate(make_article())
    with pytest.raises(ValidationError):
        article.title = "changed"


def test_payload_requires_total_results():
    with pytest.raises(ValidationError):
        ArticlesPayload.model_validate({"status": "ok", "articles": []})


def test_upstream_error_decodes():
    err = UpstreamError.model_validate(
        {"status": "error", "code": "apiKeyInvalid", "message": "Your API key is invalid."}
    )
    assert err.code == "apiKeyInvalid"
    assert err.message == "Your API key is invalid."


def test_null_source_name_becomes_empty():
    article = Article.model_validate(make_article(source={"id": None, "name": None}))
    assert article.source.id is None
    assert article.source.name == ""


def test_null_source_falls_back_to_default():
    article = Article.model_validate(make_article(source=None))
    assert article.source.id is None
    assert article.source.name == ""
