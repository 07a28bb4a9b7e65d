from pydantic import BaseModel


class LiteralText(BaseModel):
    text: str

    def __str__(self) -> str:
        return self.text


class TranslatableText(BaseModel):
    key: str  # resolved by the client's language files, e.g. "commands.reload.success"
    args: list[str] = []

    def __str__(self) -> str:
        return self.key


class Feedback(BaseModel):
    text: LiteralText | TranslatableText
    broadcast_to_ops: bool = False
