from enum import Enum


class Command(Enum):
    LOOK = "look"
    MOVE = "move"
    PICK = "pick"
    INVENTORY = "inventory"
    HELP = "help"
    QUIT = "quit"
    UNKNOWN = "unknown"


# Extra tokens that map onto an existing command
ALIASES = {
    "exit": Command.QUIT,
}


class Intent:
    def __init__(self, command, argument="", token=""):
        self.command = command
        self.argument = argument
        self.token = token

    def to_dict(self):
        return {"command": self.command.value, "token": self.token, "argument": self.argument}

    def __repr__(self):
        return f"Intent({self.command.name}, {self.argument!r})"


class Listener:
    def __init__(self, aliases=None):
        self.aliases = dict(ALIASES)
        if aliases:
            self.aliases.update(aliases)

    def parse(self, user_input):
        """
        Maps one raw input line to an Intent.
        Returns None for a blank line.
        """
        text = user_input.strip()
        if not text:
            return None

        parts = text.split(" ", 1)
        token = parts[0].lower()
        argument = parts[1] if len(parts) > 1 else ""

        return Intent(self.resolve(token), argument, token)

    def resolve(self, token):
        if token in self.aliases:
            return self.aliases[token]
        try:
            return Command(token)
        except ValueError:
            return Command.UNKNOWN
