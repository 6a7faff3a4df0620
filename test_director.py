import unittest

from engine.director import Director, GameSession
from engine.listener import Listener
from engine.world import Item, Player, Room, build_start_room


class TestDirector(unittest.TestCase):
    def setUp(self):
        self.session = GameSession(Player(build_start_room()))
        self.director = Director()
        self.listener = Listener()

    def run_command(self, text, session=None):
        return self.director.execute(session or self.session, self.listener.parse(text))

    def room_names(self, session=None):
        session = session or self.session
        return [i.name for i in session.player.current_room.items]

    def inventory_names(self, session=None):
        session = session or self.session
        return [i.name for i in session.player.inventory]

    def test_pick_up_moves_item(self):
        result = self.run_command("pick up SwOrd")
        self.assertEqual(result[0]['event_type'], "inventory_add")
        self.assertEqual(result[0]['mechanics']['outcome'], "SUCCESS")
        self.assertEqual(self.room_names(), ["shield"])
        self.assertEqual(self.inventory_names(), ["sword"])

        result = self.run_command("pick up sword")
        self.assertEqual(result[0]['reason'], "item_not_found")
        self.assertEqual(self.inventory_names(), ["sword"])

    def test_missing_item_changes_nothing(self):
        result = self.run_command("pick up dagger")
        self.assertEqual(result[0]['event_type'], "error")
        self.assertEqual(result[0]['details'], {"item_name": "dagger"})
        self.assertEqual(self.room_names(), ["sword", "shield"])
        self.assertEqual(self.inventory_names(), [])

    def test_pick_needs_up_prefix(self):
        for text in ["pick sword", "pick up", "pick Up sword", "pick"]:
            result = self.run_command(text)
            self.assertEqual(result[0]['reason'], "invalid_format", text)
        self.assertEqual(self.inventory_names(), [])

    def test_duplicate_names_take_first_instance(self):
        first, second = Item("coin"), Item("coin")
        session = GameSession(Player(Room("Vault", "Shiny.", [first, second])))
        self.run_command("pick up coin", session)
        self.assertIs(session.player.inventory[0], first)
        self.assertIs(session.player.current_room.items[0], second)

    def test_move_is_unsupported(self):
        result = self.run_command("move forward")
        self.assertEqual(result, [{"event_type": "move_unsupported", "data": {"direction": "forward"}}])

    def test_quit_and_exit_stop_session(self):
        for text in ["quit", "exit"]:
            session = GameSession(Player(build_start_room()))
            result = self.run_command(text, session)
            self.assertEqual(result[0]['event_type'], "quit")
            self.assertFalse(session.running)

    def test_unknown_command(self):
        result = self.run_command("dance")
        self.assertEqual(result[0]['reason'], "unknown_command")
        self.assertTrue(self.session.running)

    def test_sessions_are_independent(self):
        other = GameSession(Player(build_start_room()))
        self.run_command("pick up shield")
        self.assertEqual(self.room_names(other), ["sword", "shield"])
        self.assertEqual(self.inventory_names(other), [])


if __name__ == '__main__':
    unittest.main()
