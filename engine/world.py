START_ROOM = {
    "name": "A small stone chamber",
    "description": "A dimly lit room with stone walls.",
    "items": ["sword", "shield"],
}

# ==========================================
# CORE OBJECT MODEL
# ==========================================

class Item:
    __slots__ = ("_name",)

    def __init__(self, name):
        self._name = name

    @property
    def name(self):
        return self._name

    def match_name(self, name):
        return self._name.lower() == name.lower()

    def __repr__(self):
        return f"Item({self._name!r})"


class Room:
    def __init__(self, name, description, items=None):
        self.name = name
        self.description = description
        self.items = list(items or [])

    def add_item(self, item):
        self.items.append(item)

    def remove_item(self, item):
        # By identity: two items may share a name.
        for i, held in enumerate(self.items):
            if held is item:
                del self.items[i]
                return

    def get_item(self, name):
        for item in self.items:
            if item.match_name(name): return item
        return None

    def describe(self):
        desc = f"{self.name}: {self.description}\nItems here: "
        if not self.items:
            desc += "none"
        else:
            for item in self.items:
                desc += item.name + ", "
        return desc


class Player:
    def __init__(self, current_room):
        self._current_room = current_room
        self._inventory = []

    @property
    def current_room(self):
        return self._current_room

    @property
    def inventory(self):
        return self._inventory

    def add_item(self, item):
        self._inventory.append(item)


def build_start_room(data=None):
    """
    Creates the starting room and seeds it with its items, in order.
    """
    data = data or START_ROOM
    room = Room(data['name'], data['description'])
    for item_name in data.get('items', []):
        room.add_item(Item(item_name))
    return room
