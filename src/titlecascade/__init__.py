"""titlecascade — hierarchical page titles for nested views.

Each mounted view contributes one part of the title; the parts are
combined most specific first::

    from titlecascade import HeadTitle, TitleBinding, title_scope

    head = HeadTitle()
    with title_scope():
        with TitleBinding("My App", level=0, sink=head):
            with TitleBinding("Settings"):
                with TitleBinding("Profile"):
                    head.title  # "Profile • Settings • My App"

On navigation call ``reset_level_counter()`` before the new views
mount. For servers, wrap the ASGI app in ``TitleScopeMiddleware`` so
every request gets its own registry.
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_SEPARATOR",
    "OVERRIDE_LEVEL",
    "HeadTitle",
    "InvalidArgument",
    "MalformedPart",
    "TitleBinding",
    "TitleConfig",
    "TitleError",
    "TitlePart",
    "TitleRegistry",
    "TitleScopeMiddleware",
    "TitleSink",
    "build_title",
    "clear_title_state",
    "current_title",
    "get_next_level",
    "get_registry",
    "register_title_globals",
    "remove_title_part",
    "reset_level_counter",
    "set_separator",
    "set_title_part",
    "title_scope",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import titlecascade`` fast while providing a flat top-level API.
    """
    if name in ("DEFAULT_SEPARATOR", "OVERRIDE_LEVEL", "TitlePart"):
        from titlecascade import parts as _parts

        return getattr(_parts, name)

    if name in ("InvalidArgument", "MalformedPart", "TitleError"):
        from titlecascade import errors as _errors

        return getattr(_errors, name)

    if name == "TitleConfig":
        from titlecascade.config import TitleConfig

        return TitleConfig

    if name == "build_title":
        from titlecascade.cascade import build_title

        return build_title

    if name == "TitleRegistry":
        from titlecascade.registry import TitleRegistry

        return TitleRegistry

    if name in (
        "clear_title_state",
        "current_title",
        "get_next_level",
        "get_registry",
        "remove_title_part",
        "reset_level_counter",
        "set_separator",
        "set_title_part",
        "title_scope",
    ):
        from titlecascade import context as _ctx

        return getattr(_ctx, name)

    if name == "TitleBinding":
        from titlecascade.binding import TitleBinding

        return TitleBinding

    if name in ("HeadTitle", "TitleSink"):
        from titlecascade import sinks as _sinks

        return getattr(_sinks, name)

    if name == "register_title_globals":
        from titlecascade.templating import register_title_globals

        return register_title_globals

    if name == "TitleScopeMiddleware":
        from titlecascade.middleware import TitleScopeMiddleware

        return TitleScopeMiddleware

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
