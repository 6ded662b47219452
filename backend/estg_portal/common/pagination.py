from flask import request


class ShowMore:
    """
    "See More" window over an in-memory list.

    Usage:
        window = ShowMore(shown=6, step=3, total=20)

        window.has_more    # True while items remain hidden
        window.next_shown  # value of the `show` parameter for the next click
        window.slice(items)
    """

    def __init__(self, shown=6, step=3, total=0):
        """
        Args:
            shown: number of items currently visible
            step: how many items each "See More" adds
            total: total number of items in the (filtered) list
        """
        self.shown = max(1, shown)
        self.step = max(1, step)
        self.total = max(0, total)

    @property
    def has_more(self):
        return self.shown < self.total

    @property
    def next_shown(self):
        return self.shown + self.step

    def slice(self, items):
        return list(items)[:self.shown]


def get_show_arg(default, param='show', maximum=500):
    """
    Reads the number of visible items from the query string.

    Example:
        # URL: /events?show=9
        get_show_arg(6)  # 9
    """
    try:
        shown = int(request.args.get(param, default))
        shown = max(1, min(shown, maximum))
    except (TypeError, ValueError):
        shown = default
    return shown
