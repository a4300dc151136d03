from gamehooks.testing.fixtures import hook_app  # noqa: F401
