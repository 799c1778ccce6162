class FakeGemini:
    """Records every instruction; replies with a fixed string or a callable."""

    def __init__(self, reply="A red fox runs through fresh snow at dawn."):
        self.reply = reply
        self.calls = []

    async def generate(self, instruction, model_name=None):
        self.calls.append((instruction, model_name))
        if isinstance(self.reply, Exception):
            raise self.reply
        if callable(self.reply):
            return self.reply(instruction)
        return self.reply

    @property
    def instructions(self):
        return [instruction for instruction, _ in self.calls]
