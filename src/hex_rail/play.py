if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import logging

import arcade

from hex_rail.editor import RailEditor
from hex_rail.runtime import configure_logging
from hex_rail.ui.arcade_view import RailEditorWindow

logger = logging.getLogger(__name__)


def play_rail(track=None):
    configure_logging()
    editor = RailEditor()
    if track:
        editor.load_track(track)
    logger.info("Starting editor with %d rail connections", editor.grid.count_connections())
    RailEditorWindow(editor)
    arcade.run()


if __name__ == "__main__":
    play_rail()
