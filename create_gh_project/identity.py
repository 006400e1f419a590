from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

from create_gh_project.errors import ProcessSpawnError, WorkflowError
from create_gh_project.models import DEFAULT_AUTHOR, DEFAULT_GITHUB_USERNAME, GitHubInfo
from create_gh_project.proc import CommandRunner, run_command

logger = logging.getLogger(__name__)


def _gh_user_field(field: str, runner: CommandRunner | None) -> str:
    outcome = run_command(["gh", "api", "user", "--jq", f".{field}"], runner=runner)
    return (outcome.stdout or "").strip()


def get_github_info(*, runner: CommandRunner | None = None) -> GitHubInfo:
    """Look up the authenticated user's display name and login in parallel.

    Falls back to placeholder values when ``gh`` is missing, unauthenticated
    or either lookup fails.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        name_future = pool.submit(_gh_user_field, "name", runner)
        login_future = pool.submit(_gh_user_field, "login", runner)
        try:
            name = name_future.result()
            login = login_future.result()
        except (WorkflowError, ProcessSpawnError) as exc:
            logger.warning("Could not get user info from GitHub API: %s", exc)
            return GitHubInfo()

    return GitHubInfo(name=name or DEFAULT_AUTHOR, username=login or DEFAULT_GITHUB_USERNAME)
