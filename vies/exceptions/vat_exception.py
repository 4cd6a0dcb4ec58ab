class VatException(Exception):
    detail: str
    description: str

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.description
        super().__init__(self.message)
