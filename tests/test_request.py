"""Tests for checkout request files."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from bbcheckout.builders import GitCheckoutBuilder
from bbcheckout.models.checkout import GitCheckoutConfiguration
from bbcheckout.models.repository import DeploymentModel
from bbcheckout.request import CheckoutRequest

SERVER_REQUEST = """\
server_url: https://bitbucket.test/
owner: tester
repository: test-repo
credential:
  id: user-key
  kind: ssh_key
head:
  kind: pull_request
  id: "1"
  origin_owner: qa
  origin_repo_name: qa-repo
  origin_branch_name: qa-branch
  origin: fork
  checkout_strategy: merge
  target:
    name: test-branch
revision:
  kind: pull_request
  target_revision: {kind: commit, hash: deadbeef}
  source_revision: {kind: commit, hash: cafebabe}
clone_links:
  - {name: http, href: "https://tester@bitbucket.test/scm/tester/test-repo.git"}
  - {name: ssh, href: "ssh://git@bitbucket.test:7999/tester/test-repo.git"}
"""


@pytest.fixture
def request_file(tmp_path: Path) -> Path:
    path = tmp_path / "request.yaml"
    path.write_text(SERVER_REQUEST)
    return path


class TestCheckoutRequest:
    """Tests for loading and building checkout requests."""

    def test_from_yaml(self, request_file: Path):
        """Test loading a request file."""
        request = CheckoutRequest.from_yaml(request_file)

        assert request.context.deployment_model == DeploymentModel.SERVER
        assert request.context.server_root_url == "https://bitbucket.test"
        assert request.head.name == "PR-1"
        assert len(request.clone_links) == 2

    def test_build(self, request_file: Path):
        """Test building a request file."""
        config = CheckoutRequest.from_yaml(request_file).build()

        assert isinstance(config, GitCheckoutConfiguration)
        origin = config.remote("origin")
        assert origin.url == "ssh://git@bitbucket.test:7999/tester/test-repo.git"
        assert origin.refspec == "+refs/pull-requests/1/from:refs/remotes/origin/PR-1"
        assert config.merge.base_hash == "deadbeef"
        assert config.pin.commit_hash == "cafebabe"

    def test_without_clone_links_is_unresolved(self):
        """Test request without clone links stays unresolved."""
        request = CheckoutRequest(
            owner="tester", repository="test-repo", head={"kind": "branch", "name": "main"}
        )
        builder = request.builder()
        assert isinstance(builder, GitCheckoutBuilder)
        assert not builder.is_resolved

    def test_invalid_head(self, tmp_path: Path):
        """Test unknown head kind."""
        path = tmp_path / "bad.yaml"
        path.write_text("owner: a\nrepository: b\nhead: {kind: tag, name: v1}\n")
        with pytest.raises(ValidationError):
            CheckoutRequest.from_yaml(path)


class TestSampleRequests:
    """Tests for the shipped sample request files."""

    @pytest.fixture
    def configs_dir(self) -> Path:
        return Path(__file__).parent.parent / "configs" / "requests"

    def test_cloud_fork_merge(self, configs_dir: Path):
        """Test building the cloud fork merge sample."""
        config = CheckoutRequest.from_yaml(configs_dir / "cloud-fork-merge.yaml").build()

        assert isinstance(config, GitCheckoutConfiguration)
        assert config.remote("origin").url == "git@bitbucket.org:qa/qa-repo.git"
        assert config.remote("origin").credential_id == "user-key"
        assert config.remote("upstream").url == "git@bitbucket.org:tester/test-repo.git"
        assert config.merge.base_remote_ref == "remotes/upstream/test-branch"
        assert config.browser_url == "https://bitbucket.org/qa/qa-repo"

    def test_server_branch(self, configs_dir: Path):
        """Test building the server branch sample."""
        config = CheckoutRequest.from_yaml(configs_dir / "server-branch.yaml").build()

        assert isinstance(config, GitCheckoutConfiguration)
        origin = config.remote("origin")
        assert origin.url == "https://bitbucket.example.com/scm/PROJ/app.git"
        assert origin.refspec == "+refs/heads/main:refs/remotes/origin/main"
        assert origin.credential_id == "deploy-password"
        assert config.pin.commit_hash == "cafebabecafebabecafebabecafebabecafebabe"
        assert config.merge is None
        assert config.browser_url == "https://bitbucket.example.com/projects/PROJ/repos/app"

    def test_all_samples_build(self, configs_dir: Path):
        """Test every sample request file loads and builds."""
        paths = sorted(configs_dir.glob("*.yaml"))
        assert len(paths) >= 2
        for path in paths:
            assert CheckoutRequest.from_yaml(path).build() is not None
