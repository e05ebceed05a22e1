VERSION = (1, 0, 0)
__version__ = ".".join(map(str, VERSION))


def get_dispatcher():
    """Helper used for obtaining a dispatcher configured from ``settings.KVCOMMANDS``."""
    from django_kvcommands.dispatch import CommandDispatcher

    return CommandDispatcher.from_settings()
