from git_link.core import GitLinkConfig, ObjectCache, Remote
from git_link.handler import LinkHandler


def example_local_cache():
    config = GitLinkConfig(cache_root="~/.cache/git-link")

    handler = LinkHandler(config=config)

    path = handler.resolve_and_open("localhost:/home/me/src/proj/.git::master:README.md")
    print(path)
    handler.cache.close()


def example_remote_cache():
    """Fetch objects from a build host over ssh, giving up after 30 seconds."""
    config = GitLinkConfig(
        remote_program="ssh",
        remote_timeout=30,
        cache_prefix="build-",
    )

    cache = ObjectCache(config=config)
    path = cache.materialize(Remote("build.example.org"), "/srv/git/proj.git", "v1.2:setup.cfg")
    print(path)
    cache.close()


def example_env_config():
    """Read settings from GIT_LINK_* environment variables.

    GIT_LINK_VCS_PROGRAM=/opt/git/bin/git
    GIT_LINK_CACHE_ROOT=/var/cache/git-link
    GIT_LINK_STORE_LINKS=false
    """
    config = GitLinkConfig()
    print(config.model_dump())


if __name__ == "__main__":
    example_local_cache()
    example_remote_cache()
    example_env_config()
