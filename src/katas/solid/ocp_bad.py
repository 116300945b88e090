"""Open/Closed - anti-pattern.

Every new animal means opening ``Communication`` and adding a branch.
"""


class Communication:
    def communicate(self, kind):
        if kind == "dog":
            return "woof woof"
        elif kind == "cat":
            return "meow meow"
        # a fox needs a new branch here
        raise ValueError(f"Unknown animal: {kind}")
