from pycombinator.Combinators import many
from pycombinator.Prim import literal, run_parser
from pycombinator.Token import natural, token


class TimeMany:
    def setup(self):
        self.parser = many(literal("a"))
        self.numbers = many(token(natural()))
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000
        self.text = " ".join(["123"] * 10000)

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)

    def time_many_tokens(self):
        run_parser(self.numbers, self.text)
