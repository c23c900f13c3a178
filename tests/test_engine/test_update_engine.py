"""
Tests for the update check engine

Uses an in-memory tag client so each test controls exactly what the
repository host "returns" for every URI.
"""

import httpx

from git_update.engine import UpdateCheckEngine, select_update
from git_update.github.client import GitHubTagClient
from git_update.github.exceptions import RepositoryConnectionError, RepositoryHTTPError
from git_update.github.models import TagRecord
from git_update.models import ExtensionRecord, RepositoryKind, RepositoryReference
from git_update.storage.error_log import ErrorLog
from git_update.storage.options import MemoryOptionStore


class FakeTagClient:
    """Tag client returning canned tags or raising canned errors per URI"""

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls: list[str] = []

    def fetch_tags(self, repo_uri: str, identifier: str = "") -> list[TagRecord]:
        self.calls.append(repo_uri)
        result = self.responses[repo_uri]
        if isinstance(result, Exception):
            raise result
        return [TagRecord(name, f"{repo_uri}/zipball/{name}") for name in result]


def tracked(identifier: str, version: str, uri: str, homepage: str = "") -> ExtensionRecord:
    return ExtensionRecord(
        identifier=identifier,
        version=version,
        repository=RepositoryReference(RepositoryKind.GITHUB, uri),
        homepage=homepage,
    )


def make_engine(responses: dict) -> tuple[UpdateCheckEngine, FakeTagClient, ErrorLog]:
    client = FakeTagClient(responses)
    log = ErrorLog(MemoryOptionStore())
    return UpdateCheckEngine(client, log), client, log


class TestCandidateFiltering:
    """Test which extensions reach the tag client"""

    def test_untracked_extension_never_checked(self):
        """Test that an extension without a repository reference is skipped"""
        engine, client, log = make_engine({"https://github.com/o/a": ["2.0"]})
        extensions = [
            ExtensionRecord(identifier="plain/plain.php", version="1.0"),
            tracked("a/a.php", "1.0", "https://github.com/o/a"),
        ]

        decisions = engine.run(extensions)

        assert client.calls == ["https://github.com/o/a"]
        assert [d.identifier for d in decisions] == ["a/a.php"]

    def test_blank_repository_uri_not_tracked(self):
        """Test that a whitespace-only URI counts as no reference"""
        engine, client, log = make_engine({})

        assert engine.run([tracked("a/a.php", "1.0", "   ")]) == []
        assert client.calls == []

    def test_no_candidates_is_noop(self):
        """Test the fast path: no network calls, no log writes"""
        store = MemoryOptionStore()
        client = FakeTagClient({})
        engine = UpdateCheckEngine(client, ErrorLog(store))

        assert engine.run([ExtensionRecord(identifier="x", version="1.0")]) == []
        assert client.calls == []
        assert store.options == {}


class TestUpdateSelection:
    """Test version selection for a single candidate"""

    def test_highest_tag_wins_regardless_of_order(self):
        """Test tags 1.0, 1.2, 1.1 over installed 1.0 give exactly one 1.2 decision"""
        engine, client, log = make_engine({"https://github.com/o/a": ["1.0", "1.2", "1.1"]})

        decisions = engine.run([tracked("a/a.php", "1.0", "https://github.com/o/a", "https://a.example")])

        assert len(decisions) == 1
        decision = decisions[0]
        assert decision.new_version == "1.2"
        assert decision.package == "https://github.com/o/a/zipball/1.2"
        assert decision.url == "https://a.example"
        assert decision.slug == "a"

    def test_numeric_not_lexical_maximum(self):
        """Test that 1.10 beats 1.9"""
        engine, client, log = make_engine({"https://github.com/o/a": ["1.9", "1.10", "1.2"]})

        decisions = engine.run([tracked("a/a.php", "1.0", "https://github.com/o/a")])

        assert decisions[0].new_version == "1.10"

    def test_nothing_newer_emits_nothing(self):
        """Test no decision when all tags are at or below the installed version"""
        engine, client, log = make_engine({"https://github.com/o/a": ["0.9", "1.0", "1.0.0"]})

        assert engine.run([tracked("a/a.php", "1.0", "https://github.com/o/a")]) == []
        assert log.load() == []

    def test_empty_tag_list_skipped_without_logging(self):
        """Test that a repository without tags is not an error"""
        engine, client, log = make_engine({"https://github.com/o/a": []})

        assert engine.run([tracked("a/a.php", "1.0", "https://github.com/o/a")]) == []
        assert log.load() == []

    def test_malformed_tag_names_ignored(self):
        """Test that unparseable tags do not abort comparison"""
        engine, client, log = make_engine({"https://github.com/o/a": ["latest", "1.1", "nightly-build"]})

        decisions = engine.run([tracked("a/a.php", "1.0", "https://github.com/o/a")])

        assert [d.new_version for d in decisions] == ["1.1"]

    def test_suffixed_installed_version_not_downgraded(self):
        """Test that a build-suffixed installed version is not offered an older tag"""
        engine, client, log = make_engine({"https://github.com/o/a": ["0.5", "1.9"]})

        assert engine.run([tracked("a/a.php", "2.0-custom", "https://github.com/o/a")]) == []
        assert log.load() == []

    def test_suffixed_installed_version_upgraded_to_release(self):
        """Test a newer release still beats a suffixed installed version"""
        engine, client, log = make_engine({"https://github.com/o/a": ["1.2.0", "1.10.0"]})

        decisions = engine.run([tracked("a/a.php", "1.2.0-custom", "https://github.com/o/a")])

        assert [d.new_version for d in decisions] == ["1.10.0"]

    def test_select_update_returns_none_when_up_to_date(self):
        """Test the selection helper directly"""
        extension = tracked("a/a.php", "2.0", "https://github.com/o/a")

        assert select_update(extension, [TagRecord("1.0"), TagRecord("2.0")]) is None
        assert select_update(extension, [TagRecord("2.1"), TagRecord("3.0-beta")]).name == "3.0-beta"


class TestFailureHandling:
    """Test that fetch failures are isolated and logged"""

    def test_partial_failure_isolation(self):
        """Test one failing candidate does not stop the next one"""
        engine, client, log = make_engine({
            "https://github.com/o/broken": RepositoryHTTPError(
                "Tags request returned HTTP 404", status_code=404, body="Not Found"
            ),
            "https://github.com/o/ok": ["2.0"],
        })
        extensions = [
            tracked("broken/broken.php", "1.0", "https://github.com/o/broken"),
            tracked("ok/ok.php", "1.0", "https://github.com/o/ok"),
        ]

        decisions = engine.run(extensions)

        assert [d.identifier for d in decisions] == ["ok/ok.php"]
        entries = log.load()
        assert len(entries) == 1
        assert entries[0].item == "broken/broken.php"
        assert entries[0].status_code == 404
        assert entries[0].body == "Not Found"

    def test_transport_failure_logged(self):
        """Test connection errors are logged with their description"""
        engine, client, log = make_engine({
            "https://github.com/o/a": RepositoryConnectionError("down", error="ConnectError: down"),
        })

        assert engine.run([tracked("a/a.php", "1.0", "https://github.com/o/a")]) == []

        entry = log.load()[0]
        assert entry.item == "a/a.php"
        assert entry.error == "ConnectError: down"

    def test_repeated_runs_are_idempotent(self):
        """Test that runs without failures give the same decisions and no log growth"""
        engine, client, log = make_engine({
            "https://github.com/o/a": ["1.1"],
            "https://github.com/o/b": ["0.1"],
        })
        extensions = [
            tracked("a/a.php", "1.0", "https://github.com/o/a"),
            tracked("b/b.php", "1.0", "https://github.com/o/b"),
        ]

        first = engine.run(extensions)
        second = engine.run(extensions)

        assert set(first) == set(second)
        assert log.load() == []


class TestWithHttpClient:
    """Run the engine against the real client over a mock transport"""

    def test_end_to_end(self):
        """Test 200, 404 and malformed bodies in one batch"""

        def handler(request: httpx.Request) -> httpx.Response:
            path = request.url.path
            if path == "/repos/o/good/tags":
                return httpx.Response(200, json=[
                    {"name": "v1.0.0", "zipball_url": "https://api.github.com/repos/o/good/zipball/v1.0.0"},
                    {"name": "v1.4.0", "zipball_url": "https://api.github.com/repos/o/good/zipball/v1.4.0"},
                ])
            if path == "/repos/o/weird/tags":
                return httpx.Response(200, text="<html>maintenance</html>")
            return httpx.Response(404, json={"message": "Not Found"})

        client = GitHubTagClient(client=httpx.Client(transport=httpx.MockTransport(handler)))
        log = ErrorLog(MemoryOptionStore())
        engine = UpdateCheckEngine(client, log)

        decisions = engine.run([
            tracked("good/good.php", "1.0.0", "https://github.com/o/good/"),
            tracked("weird/weird.php", "1.0.0", "https://github.com/o/weird"),
            tracked("gone/gone.php", "1.0.0", "https://github.com/o/gone"),
        ])

        assert [(d.identifier, d.new_version) for d in decisions] == [("good/good.php", "v1.4.0")]
        assert [e.item for e in log.load()] == ["gone/gone.php"]

    def test_unusable_port_does_not_abort_batch(self):
        """Test a repository URI httpx rejects is logged and the next candidate still runs"""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"name": "2.0", "zipball_url": "https://api.github.com/zip/2.0"}])

        client = GitHubTagClient(client=httpx.Client(transport=httpx.MockTransport(handler)))
        log = ErrorLog(MemoryOptionStore())
        engine = UpdateCheckEngine(client, log)

        decisions = engine.run([
            tracked("bad/bad.php", "1.0", "https://github.com:abc/o/r"),
            tracked("ok/ok.php", "1.0", "https://github.com/o/ok"),
        ])

        assert [d.identifier for d in decisions] == ["ok/ok.php"]
        entries = log.load()
        assert [e.item for e in entries] == ["bad/bad.php"]
        assert entries[0].error.startswith("InvalidURL")
