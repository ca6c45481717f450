from .tokens import OPEN_PAREN, CLOSE_PAREN


class Tokenizer:
    def __init__(self, text):
        self.text = text

    def normalize(self):
        # Parentheses always become standalone tokens
        return (
            self.text
            .replace(OPEN_PAREN, f" {OPEN_PAREN} ")
            .replace(CLOSE_PAREN, f" {CLOSE_PAREN} ")
        )

    def generate_tokens(self):
        return self.normalize().split()
