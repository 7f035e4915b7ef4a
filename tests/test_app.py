"""
Tests for the Qt side: the scene-backed surface, the store and the panels.

Run offscreen; skipped entirely when PySide6 widgets cannot be loaded.
"""
import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsLineItem, QGraphicsScene, QGraphicsSimpleTextItem

from drawingtrees import config
from drawingtrees.app.state import Store
from drawingtrees.app.ui.main_window import MainWindow
from drawingtrees.app.ui.panels import InsertPanel, ParametersPanel
from drawingtrees.app.ui.tree_view import SceneSurface
from drawingtrees.model.primitives import Circle, Label, Line, RecordingSurface


@pytest.fixture
def store(qapp):
    s = Store()
    s.attach_surface(RecordingSurface(), width=400.0)
    return s


class TestSceneSurface:
    def test_circle(self, qapp):
        scene = QGraphicsScene()
        item = SceneSurface(scene).add(Circle(100.0, 50.0, 40.0))
        assert isinstance(item, QGraphicsEllipseItem)
        rect = item.rect()
        assert (rect.x(), rect.y(), rect.width(), rect.height()) == (80.0, 30.0, 40.0, 40.0)
        assert item.zValue() == config.CIRCLE_Z
        assert item.brush().color().name() == config.NODE_FILL_COLOR.lower()

    def test_line(self, qapp):
        scene = QGraphicsScene()
        item = SceneSurface(scene).add(Line(0.0, 0.0, 10.0, 20.0))
        assert isinstance(item, QGraphicsLineItem)
        line = item.line()
        assert (line.x2(), line.y2()) == (10.0, 20.0)
        assert item.zValue() == config.LINE_Z

    def test_label_is_centred(self, qapp):
        scene = QGraphicsScene()
        item = SceneSurface(scene).add(Label(100.0, 50.0, 40.0, "Q"))
        assert isinstance(item, QGraphicsSimpleTextItem)
        centre = item.mapToScene(item.boundingRect().center())
        assert centre.x() == pytest.approx(100.0)
        assert centre.y() == pytest.approx(50.0)
        assert item.zValue() == config.LABEL_Z

    def test_label_font_follows_box_size(self, qapp):
        scene = QGraphicsScene()
        surface = SceneSurface(scene)
        small = surface.add(Label(0.0, 0.0, 20.0, "A"))
        large = surface.add(Label(0.0, 0.0, 80.0, "A"))
        assert small.font().pixelSize() == round(20.0 * config.LABEL_FONT_SCALE)
        assert large.font().pixelSize() == round(80.0 * config.LABEL_FONT_SCALE)
        assert large.boundingRect().height() > small.boundingRect().height()

    def test_label_font_never_collapses(self, qapp):
        scene = QGraphicsScene()
        item = SceneSurface(scene).add(Label(0.0, 0.0, 0.5, "A"))
        assert item.font().pixelSize() == 1

    def test_unknown_primitive(self, qapp):
        with pytest.raises(TypeError):
            SceneSurface(QGraphicsScene()).add("not a primitive")

    def test_clear(self, qapp):
        scene = QGraphicsScene()
        surface = SceneSurface(scene)
        surface.add(Circle(0.0, 0.0, 10.0))
        surface.clear()
        assert scene.items() == []


class TestStore:
    def test_insert_emits(self, store):
        inserted, changed = [], []
        store.value_inserted.connect(inserted.append)
        store.tree_changed.connect(changed.append)
        store.insert("K")
        assert inserted == ["K"]
        assert changed == [store.tree]

    def test_root_centred_on_surface(self, store):
        store.insert("K")
        assert store.tree.positions()[0][1:] == (200.0, 1.5 * config.DIAMETER)

    def test_reset_clears_and_starts_over(self, store):
        store.insert_many("DBF")
        surface = store.tree.surface
        before = surface.clear_count
        resets = []
        store.tree_reset.connect(lambda: resets.append(True))
        store.reset()
        assert surface.clear_count == before + 1
        assert surface.primitives == []
        assert len(store.tree) == 0
        assert store.tree.surface is surface
        assert resets == [True]

    def test_reset_then_same_sequence_is_identical(self, store):
        store.insert_many("MFTAH")
        first = store.tree.positions()
        store.reset()
        store.insert_many("MFTAH")
        assert store.tree.positions() == first

    def test_set_parameters_single_render(self, store):
        store.insert_many("DBF")
        surface = store.tree.surface
        before = surface.clear_count
        store.set_parameters(diameter=20.0, level_height=30.0)
        assert surface.clear_count == before + 1
        assert store.tree.diameter == 20.0
        assert store.tree.root_y == 30.0
        assert store.params.level_height == 30.0

    def test_insert_many_reports_every_value(self, store):
        inserted, changed = [], []
        store.value_inserted.connect(inserted.append)
        store.tree_changed.connect(changed.append)
        surface = store.tree.surface
        before = surface.clear_count
        store.insert_many(iter("DBF"))
        assert inserted == ["D", "B", "F"]
        assert len(changed) == 1
        assert surface.clear_count == before + 1

    def test_set_parameters_rejects_unknown(self, store):
        with pytest.raises(ValueError):
            store.set_parameters(radius=3.0)

    def test_surface_width_moves_root(self, store):
        store.insert("K")
        store.set_surface_width(1000.0)
        assert store.tree.root_x == 500.0


class TestPanels:
    def test_add_uses_first_character(self, store):
        panel = InsertPanel(store)
        panel.input.setText("xyz")
        panel.button_add.click()
        assert store.tree.values() == ["x"]
        assert panel.input.text() == ""

    def test_enter_adds(self, store):
        panel = InsertPanel(store)
        panel.input.setText("q")
        panel.input.returnPressed.emit()
        assert store.tree.values() == ["q"]

    def test_empty_input_ignored(self, store):
        panel = InsertPanel(store)
        panel.button_add.click()
        assert len(store.tree) == 0

    def test_reset_enabled_only_for_non_empty_tree(self, store):
        panel = InsertPanel(store)
        assert not panel.button_reset.isEnabled()
        store.insert("A")
        assert panel.button_reset.isEnabled()
        store.reset()
        assert not panel.button_reset.isEnabled()

    def test_panel_tree_tracks_store(self, store):
        panel = InsertPanel(store)
        store.reset()
        assert panel.tree is store.tree

    def test_reset_button(self, store):
        panel = InsertPanel(store)
        store.insert_many("ABC")
        panel.button_reset.click()
        assert len(store.tree) == 0

    def test_parameters_panel_updates_tree(self, store):
        panel = ParametersPanel(store)
        assert panel.params() == {
            "diameter": config.DIAMETER,
            "level_height": config.LEVEL_HEIGHT,
            "child_separation": config.CHILD_SEPARATION,
        }
        panel.spin("child_separation").setValue(12.0)
        assert store.tree.child_separation == 12.0
        assert store.params.child_separation == 12.0


class TestMainWindow:
    def test_insert_draws_on_scene(self, qapp):
        window = MainWindow(Store())
        window.store.insert_many("DBFACEG")
        items = window.work_area.view.scene().items()
        assert sum(isinstance(i, QGraphicsEllipseItem) for i in items) == 7
        assert sum(isinstance(i, QGraphicsLineItem) for i in items) == 6
        assert sum(isinstance(i, QGraphicsSimpleTextItem) for i in items) == 7

    def test_console_lists_bulk_insertions(self, qapp):
        window = MainWindow(Store())
        window.store.insert_many("XY")
        text = window.console.toPlainText()
        assert "Inserted 'X'" in text
        assert "Inserted 'Y'" in text

    def test_view_resize_recentres_root(self, qapp):
        window = MainWindow(Store())
        window.store.insert("M")
        view = window.work_area.view
        view.resized.emit(800.0, 300.0)
        assert window.store.tree.root_x == 400.0
        assert window.store.tree.positions()[0][1] == 400.0

    def test_shown_window_keeps_root_centred(self, qapp):
        window = MainWindow(Store())
        window.store.insert_many("MFT")
        window.resize(900, 600)
        window.show()
        qapp.processEvents()
        view = window.work_area.view
        assert window.store.tree.root_x == view.viewport_size()[0] / 2

        window.resize(1300, 600)
        qapp.processEvents()
        width = view.viewport_size()[0]
        assert window.store.tree.root_x == width / 2
        assert window.store.tree.positions()[0][1] == width / 2
        window.close()

    def test_console_lists_insertions(self, qapp):
        window = MainWindow(Store())
        window.insert_panel.input.setText("A")
        window.insert_panel.button_add.click()
        assert "Inserted 'A'" in window.console.toPlainText()
