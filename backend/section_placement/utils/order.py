from dataclasses import replace


def move_item(items, from_index, to_index):
    """
    Returns a new list with the item at from_index spliced into to_index.
    """
    items = list(items)
    moved = items.pop(from_index)
    items.insert(to_index, moved)
    return items


def compact_order(sections, order_field="sort_order"):
    """
    Re-assigns sequential order values (0..N-1) in list order.
    """
    return [
        replace(section, **{order_field: index})
        for index, section in enumerate(sections)
    ]
