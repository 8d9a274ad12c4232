from github import Auth, Github

from prlink.config.settings import DEFAULT_GITHUB_API_URL


class GitHubClient:
    def __init__(self, token: str, base_url: str = DEFAULT_GITHUB_API_URL) -> None:
        auth = Auth.Token(token) if token else None
        self._client = Github(auth=auth, base_url=base_url)

    def get_repo(self, owner: str, name: str):
        return self._client.get_repo(f'{owner}/{name}')

    def close(self) -> None:
        try:
            self._client.close()
        except AttributeError:
            return

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
