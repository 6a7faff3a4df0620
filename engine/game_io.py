from rich.console import Console

# ==========================================
# GAME IO
# ==========================================
class GameIO:
    def __init__(self, console=None, history_size=10):
        self.console = console or Console()
        self.history_size = history_size
        self.history = []
        self.last_input = None
        self.current_turn_output = []

    def write(self, message):
        # Game text is printed verbatim: no markup, emoji codes, highlighting or wrapping
        self.console.print(str(message), markup=False, highlight=False, emoji=False, soft_wrap=True)
        self.current_turn_output.append(str(message))

    def read(self, prompt):
        return self.console.input(prompt, markup=False, emoji=False)

    def log_input(self, text):
        if self.last_input is not None:
            self.history.append("User: " + self.last_input)
            self.history.append("System: " + " ".join(self.current_turn_output))
            self.history = self.history[-self.history_size:]

        self.last_input = text
        self.current_turn_output = []

    def get_history_str(self):
        return "\n".join(self.history)
