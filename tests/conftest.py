"""Shared fixtures: builders for X.com page markup."""

import pytest
from bs4 import BeautifulSoup

STATUS_URL = "https://x.com/alice/status/1234567890"
POST_DATE = "2026-01-02T03:04:05.000Z"


def _make_post(name: str, handle: str, text_html: str, extra_html: str = "", date: str = POST_DATE) -> str:
    """One post element as X renders it (author block, time, text, engagement bar)."""
    return (
        '<article role="article">'
        '<div data-testid="User-Name">'
        f'<a href="/{handle}"><span>{name}</span></a>'
        f'<a href="/{handle}"><span>@{handle}</span></a>'
        "</div>"
        f'<time datetime="{date}">Jan 2</time>'
        f'<div data-testid="tweetText" lang="en">{text_html}</div>'
        f"{extra_html}"
        '<div role="group"><button>12</button><button>Like</button></div>'
        "</article>"
    )


def _make_page(*posts: str) -> str:
    return f"<html><body><main>{''.join(posts)}</main></body></html>"


def _make_article_page(blocks_html: str, title: str = "Shipping Faster") -> str:
    """An article page with a title, author block and Draft.js body."""
    title_html = f'<div data-testid="twitter-article-title">{title}</div>' if title else ""
    return (
        "<html><body>"
        '<article role="article">'
        '<div data-testid="User-Name">'
        '<a href="/alice"><span>Alice</span></a><a href="/alice"><span>@alice</span></a>'
        "</div>"
        f'<time datetime="{POST_DATE}">Jan 2</time>'
        f"{title_html}"
        '<div data-testid="twitterArticleRichTextView">'
        '<div data-testid="longformRichTextComponent">'
        f'<div data-contents="true">{blocks_html}</div>'
        "</div></div>"
        "</article>"
        "</body></html>"
    )


@pytest.fixture
def status_url():
    return STATUS_URL


@pytest.fixture
def make_post():
    return _make_post


@pytest.fixture
def make_page():
    return _make_page


@pytest.fixture
def make_article_page():
    return _make_article_page


@pytest.fixture
def soup():
    """Parse an HTML snippet."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def element(soup):
    """First element of an HTML snippet."""

    def _element(html: str):
        return soup(html).find(True)

    return _element
