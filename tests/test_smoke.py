from hex_rail.editor import REFERENCE_TRACK, RailEditor


def test_import_package():
    import hex_rail

    assert hex_rail.__version__


def test_editor_renders_playable_diamond():
    editor = RailEditor()
    editor.load_track(REFERENCE_TRACK)
    scene = editor.render()
    assert len(scene.cells) == 37
    assert editor.grid.count_connections() == len(REFERENCE_TRACK)
