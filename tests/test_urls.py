"""Tests for the clone URL model."""

from __future__ import annotations

import pytest

from bbcheckout.urls import CloneUrl, ssh_port_of


class TestCloneUrlParsing:
    """Tests for parsing both clone URL syntaxes."""

    def test_https(self):
        """Test parsing an HTTPS clone URL."""
        url = CloneUrl.parse("https://tester@bitbucket.test/scm/tester/test-repo.git")
        assert url.scheme == "https"
        assert url.user == "tester"
        assert url.host == "bitbucket.test"
        assert url.port is None
        assert url.segments == ("scm", "tester", "test-repo.git")
        assert not url.is_scp_like

    def test_ssh_with_port(self):
        """Test parsing an SSH clone URL with a port."""
        url = CloneUrl.parse("ssh://git@bitbucket.test:7999/tester/test-repo.git")
        assert url.scheme == "ssh"
        assert url.port == 7999
        assert url.path == "tester/test-repo.git"

    def test_scp_like(self):
        """Test parsing an SCP-like clone URL."""
        url = CloneUrl.parse("git@bitbucket.org:tester/test-repo.git")
        assert url.is_scp_like
        assert url.user == "git"
        assert url.host == "bitbucket.org"
        assert url.segments == ("tester", "test-repo.git")
        assert str(url) == "git@bitbucket.org:tester/test-repo.git"

    @pytest.mark.parametrize("text", ["", "not a url", "/local/path"])
    def test_invalid(self, text):
        """Test malformed clone URLs."""
        with pytest.raises(ValueError):
            CloneUrl.parse(text)

    def test_str_keeps_form(self):
        """Test rendering keeps the original syntax."""
        text = "ssh://git@bitbucket.test:7999/tester/test-repo.git"
        assert str(CloneUrl.parse(text)) == text


class TestWithRepository:
    """Tests for substituting owner and repository."""

    def test_scp_like(self):
        """Test repository substitution in SCP-like form."""
        url = CloneUrl.parse("git@bitbucket.org:tester/test-repo.git")
        assert str(url.with_repository("qa", "qa-repo")) == "git@bitbucket.org:qa/qa-repo.git"

    def test_server_https_keeps_prefix(self):
        """Test repository substitution keeps the scm prefix."""
        url = CloneUrl.parse("https://bitbucket.test/scm/tester/test-repo.git")
        assert (
            str(url.with_repository("qa", "qa-repo"))
            == "https://bitbucket.test/scm/qa/qa-repo.git"
        )

    def test_mercurial_has_no_suffix(self):
        """Test repository substitution without a .git suffix."""
        url = CloneUrl.parse("ssh://hg@bitbucket.org/tester/test-repo")
        assert str(url.with_repository("qa", "qa-repo")) == "ssh://hg@bitbucket.org/qa/qa-repo"

    def test_suffix_not_doubled(self):
        """Test .git suffix is not doubled."""
        url = CloneUrl.parse("https://bitbucket.org/tester/test-repo.git")
        assert str(url.with_repository("qa", "qa-repo.git")).endswith("/qa/qa-repo.git")

    def test_too_short(self):
        """Test URL without an owner segment."""
        url = CloneUrl.parse("https://bitbucket.org/repo.git")
        with pytest.raises(ValueError):
            url.with_repository("qa", "qa-repo")


def test_ssh_port_of():
    """Test SSH port lookup."""
    assert ssh_port_of("ssh://git@bitbucket.test:7999/tester/test-repo.git") == 7999
    assert ssh_port_of("git@bitbucket.org:tester/test-repo.git") is None
    assert ssh_port_of("garbage") is None
