WELCOME = "Welcome to the MUD game! Type 'help' for a list of commands."
FAREWELL = "Thanks for playing!"

HELP_LINES = [
    "Available commands:",
    "look - Describe the current room.",
    "move <forward|back|left|right> - Move in a direction.",
    "pick up <itemName> - Pick up an item.",
    "inventory - List items in your inventory.",
    "help - Show this menu.",
    "quit/exit - End the game.",
]

ERROR_MESSAGES = {
    "unknown_command": "Unknown command. Type 'help' for a list of commands.",
    "invalid_format": "Invalid command format! Use: pick up <itemName>",
    "item_not_found": "No item named '{item_name}' here!",
}


class Narrator:
    def __init__(self):
        """
        The Narrator takes the Director's result events and writes the text.
        Every message the player sees comes from here.
        """
        self.renderers = {
            "room_description": self._narrate_room,
            "move_unsupported": self._narrate_move,
            "inventory_add": self._narrate_pickup,
            "inventory_report": self._narrate_inventory,
            "help": self._narrate_help,
            "quit": self._narrate_quit,
            "error": self._narrate_error,
        }

    def narrate(self, results):
        lines = []
        for event in results:
            event_type = event.get('event_type')
            renderer = self.renderers.get(event_type)
            if renderer is None:
                raise ValueError(f"No narration for event type: {event_type!r}")
            lines.extend(renderer(event))
        return lines

    def _narrate_room(self, event):
        return [event['data']['text']]

    def _narrate_move(self, event):
        return ["You can't move in this version yet!"]

    def _narrate_pickup(self, event):
        return [f"You picked up {event['mechanics']['item_name']}."]

    def _narrate_inventory(self, event):
        items = event['mechanics']['items']
        if not items:
            return ["Your inventory is empty."]
        return ["You are carrying:"] + [f"- {name}" for name in items]

    def _narrate_help(self, event):
        return list(HELP_LINES)

    def _narrate_quit(self, event):
        # The farewell is printed once the loop has stopped
        return []

    def _narrate_error(self, event):
        template = ERROR_MESSAGES[event['reason']]
        return [template.format(**event.get('details', {}))]
