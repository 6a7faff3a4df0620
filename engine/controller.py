import json

from rich.markup import escape
from rich.panel import Panel

from engine.director import Director, GameSession
from engine.game_io import GameIO
from engine.listener import Listener
from engine.narrator import FAREWELL, WELCOME, Narrator
from engine.world import Player, build_start_room


class GameController:
    def __init__(self, io=None, config=None, room=None):
        """
        One game: a session plus the Listener -> Director -> Narrator pipeline.
        """
        self.config = config or {}
        self.io = io or GameIO()
        self.session = GameSession(Player(room or build_start_room()))
        self.listener = Listener()
        self.director = Director()
        self.narrator = Narrator()

    @property
    def player(self):
        return self.session.player

    @property
    def running(self):
        return self.session.running

    def handle_input(self, user_input):
        # A. LISTENER PHASE
        intent = self.listener.parse(user_input)
        if intent is None:
            return []

        self.io.log_input(user_input.strip())

        # B. DIRECTOR PHASE
        results = self.director.execute(self.session, intent)

        if self.config.get('debug_mode', False):
            self.io.console.print(Panel(
                f"[dim]Recent History:[/]\n{escape(self.io.get_history_str())}\n\n"
                f"[dim]Intent:[/]\n{escape(json.dumps(intent.to_dict(), indent=2))}\n\n[dim]Results:[/]\n{escape(json.dumps(results, indent=2))}",
                title="[DEBUG: Director Output]",
                border_style="dim"
            ))

        # C. NARRATOR PHASE
        lines = self.narrator.narrate(results)
        for line in lines:
            self.io.write(line)
        return lines

    def run(self):
        prompt = self.config.get('prompt', "> ")
        self.io.write(WELCOME)
        while self.running:
            try:
                user_input = self.io.read(prompt)
            except (EOFError, KeyboardInterrupt):
                self.session.running = False
                break
            self.handle_input(user_input)
        self.io.write(FAREWELL)
