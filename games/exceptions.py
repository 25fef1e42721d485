class GameNotFound(LookupError):
    """No game is stored under the requested slug."""

    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"No game with slug {slug!r}")
