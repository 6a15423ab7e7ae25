"""Many simultaneous requests against one app and one shared store.

Everything runs on a single event loop, as the server does, so these tests
exercise interleaving at every ``await`` in the request path.
"""

import asyncio

import pytest


async def gather_ok(requests, expected_status=200):
    """Run requests concurrently and fail on any exception or unexpected status."""
    responses = await asyncio.gather(*requests, return_exceptions=True)
    for i, r in enumerate(responses):
        if isinstance(r, Exception):
            pytest.fail(f"Request {i} raised: {r!r}")
        assert r.status_code == expected_status, f"Request {i}: {r.status_code} {r.text[:200]}"
    return responses


class TestConcurrentRequests:

    async def test_shorten_distinct_urls(self, client, store):
        urls = [f"https://example.com/page_{i}" for i in range(30)]

        responses = await gather_ok(client.post("/api/shorten", json={"url": u}) for u in urls)

        assert [r.json()["original_url"] for r in responses] == urls
        codes = {r.json()["short_code"] for r in responses}
        assert len(codes) == len(urls)
        assert len(store) == len(urls)

    async def test_same_url_submitted_concurrently(self, client, store):
        """Each form submission of one URL gets its own code."""
        await gather_ok(
            client.post("/shorten", data={"url": "https://example.com/same"})
            for _ in range(20)
        )

        assert len(store) == 20

    async def test_redirects(self, client):
        created = await client.post("/api/shorten", json={"url": "https://example.com/target"})
        code = created.json()["short_code"]

        responses = await gather_ok(
            (client.get(f"/short/{code}", follow_redirects=False) for _ in range(20)),
            expected_status=301,
        )

        assert {r.headers["location"] for r in responses} == {"https://example.com/target"}

    async def test_reads_interleaved_with_writes(self, client):
        created = await client.post("/api/shorten", json={"url": "https://example.com/first"})
        code = created.json()["short_code"]

        requests = []
        for i in range(20):
            requests.append(client.get(f"/api/urls/{code}"))
            requests.append(client.post("/api/shorten", json={"url": f"https://example.com/{i}"}))
            requests.append(client.get("/api/health"))
        responses = await gather_ok(requests)

        for r in responses[::3]:
            assert r.json()["original_url"] == "https://example.com/first"
        assert all(r.json()["status"] == "healthy" for r in responses[2::3])
