from engine.listener import Command


class GameSession:
    def __init__(self, player):
        """
        Everything one game needs between turns.
        Passed explicitly to the Director, so several games can run side by side.
        """
        self.player = player
        self.running = True


class Director:
    def __init__(self):
        """
        The Director is the STATE MACHINE.
        It does not generate text. It mutates the session and returns result events.
        """
        self.handlers = {
            Command.LOOK: self.look,
            Command.MOVE: self.move,
            Command.PICK: self.pick,
            Command.INVENTORY: self.inventory,
            Command.HELP: self.help,
            Command.QUIT: self.quit,
        }

    # ==========================================================
    # 1. THE ROOM VIEW
    # ==========================================================
    def look(self, session, argument):
        room = session.player.current_room
        return [{
            "event_type": "room_description",
            "data": {"room_name": room.name, "text": room.describe()}
        }]

    # ==========================================================
    # 2. THE SCENE SHIFTER (not available in a single-room game)
    # ==========================================================
    def move(self, session, argument):
        return [{"event_type": "move_unsupported", "data": {"direction": argument}}]

    # ==========================================================
    # 3. THE INVENTORY MANAGER
    # ==========================================================
    def pick(self, session, argument):
        if not argument.startswith("up "):
            return [self._return_error("invalid_format", {"argument": argument})]
        return [self.pick_up(session, argument[3:])]

    def pick_up(self, session, item_name):
        """
        Moves the first item whose name matches from the room to the inventory.
        Input: "SwOrd"
        """
        player = session.player
        room = player.current_room
        item = room.get_item(item_name)

        if item is None:
            return self._return_error("item_not_found", {"item_name": item_name})

        room.remove_item(item)
        player.add_item(item)
        return self._return_inventory_result("inventory_add", {"item_name": item_name, "outcome": "SUCCESS"})

    def inventory(self, session, argument):
        names = [item.name for item in session.player.inventory]
        return [self._return_inventory_result("inventory_report", {"items": names})]

    # ==========================================================
    # 4. META COMMANDS
    # ==========================================================
    def help(self, session, argument):
        return [{"event_type": "help"}]

    def quit(self, session, argument):
        session.running = False
        return [{"event_type": "quit"}]

    # ==========================================================
    # 5. INTERNAL HELPERS
    # ==========================================================
    def execute(self, session, intent):
        """
        Master Router: Takes an Intent -> Runs the handler for its command.
        Returns a LIST of results.
        """
        handler = self.handlers.get(intent.command)
        if handler is None:
            return [self._return_error("unknown_command", {"token": intent.token})]
        return handler(session, intent.argument)

    def _return_error(self, reason, details=None):
        return {
            "event_type": "error",
            "status": "FAILURE",
            "reason": reason,
            "details": details or {}
        }

    def _return_inventory_result(self, event_type, data):
        return {
            "event_type": event_type,
            "mechanics": data,
        }
