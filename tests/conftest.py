"""Shared fixtures: a raw-content HTML dictionary and a fake downstream."""

import asyncio
import json
from typing import List, Optional

import httpx
import pytest

from pkg.zstd import Zstd, ZstdConfig, load_dictionary
from pkg.logger import Logger, LoggerConfig

SAMPLE_DICTIONARY = (
    b'<!DOCTYPE html><html lang="ko"><head><meta charset="utf-8">'
    b'<meta name="viewport" content="width=device-width, initial-scale=1">'
    b"<title>Blog</title>"
    b'<link rel="stylesheet" href="/static/css/style.css"></head>'
    b'<body><div id="wrap"><header class="header"><nav class="gnb"><ul>'
    b'<li><a href="/">Home</a></li><li><a href="/category">Category</a></li>'
    b'<li><a href="/tag">Tag</a></li><li><a href="/guestbook">Guestbook</a></li>'
    b'</ul></nav></header><main id="content"><article class="post">'
    b'<h1 class="post-title"></h1><div class="post-meta"><span class="date"></span>'
    b'<span class="author"></span></div><div class="post-body"><p></p></div>'
    b'</article><aside class="sidebar"><section class="recent-posts"><h2>Recent posts</h2>'
    b'<ul><li><a href="/entry/"></a></li></ul></section></aside></main>'
    b'<footer class="footer"><p>Powered by Blog</p></footer></div>'
    b'<script src="/static/js/main.js"></script></body></html>'
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="session")
def dictionary_bytes() -> bytes:
    return SAMPLE_DICTIONARY


@pytest.fixture(scope="session")
def dictionary(dictionary_bytes):
    return load_dictionary(dictionary_bytes, level=9)


@pytest.fixture
def compressor(dictionary) -> Zstd:
    return Zstd(ZstdConfig(level=9), dictionary)


@pytest.fixture(scope="session")
def logger() -> Logger:
    return Logger(LoggerConfig(level="DEBUG", enable_console=False))


class FakeDownstream:
    """Stand-in for the HTML storage service behind httpx.MockTransport."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.delay: float = 0.0
        self.fail_with: Optional[Exception] = None

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise self.fail_with
        return httpx.Response(self.status_code, json={"status": "stored"})

    def unreachable(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.fail_with = httpx.ConnectError("connection refused")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def json_bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def downstream() -> FakeDownstream:
    return FakeDownstream()
