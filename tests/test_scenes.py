from forradia.scenes import Scene, SceneManager, SceneName


class _Recorder(Scene):
    def __init__(self, label, log):
        self.label = label
        self.log = log

    def update(self):
        self.log.append(("update", self.label))

    def render(self):
        self.log.append(("render", self.label))


def test_scene_name_order():
    manager = SceneManager()
    visited = []
    for name in SceneName:
        manager.go_to(name)
        visited.append(manager.current.name)
    assert visited == [
        "INTRO",
        "MAIN_MENU",
        "WORLD_GENERATION",
        "MAIN",
    ]


def test_manager_starts_at_intro():
    assert SceneManager().current is SceneName.INTRO


def test_update_and_render_current_scene_only():
    log = []
    manager = SceneManager()
    manager.add_scene(SceneName.INTRO, _Recorder("intro", log))
    manager.add_scene(SceneName.MAIN, _Recorder("main", log))
    manager.update_current()
    manager.render_current()
    assert log == [("update", "intro"), ("render", "intro")]


def test_go_to_switches_scene():
    log = []
    manager = SceneManager()
    manager.add_scene(SceneName.INTRO, _Recorder("intro", log))
    manager.add_scene(SceneName.MAIN, _Recorder("main", log))
    manager.go_to(SceneName.MAIN)
    manager.update_current()
    assert manager.current is SceneName.MAIN and log == [("update", "main")]


def test_missing_scene_is_skipped():
    manager = SceneManager()
    manager.go_to(SceneName.MAIN_MENU)
    assert manager.update_current() is False and manager.render_current() is False


def test_add_scene_keeps_first_registration():
    log = []
    manager = SceneManager()
    manager.add_scene(SceneName.INTRO, _Recorder("first", log))
    manager.add_scene(SceneName.INTRO, _Recorder("second", log))
    manager.update_current()
    assert log == [("update", "first")]


def test_base_scene_is_usable():
    manager = SceneManager()
    manager.add_scene(SceneName.INTRO, Scene())
    assert manager.update_current() is True and manager.render_current() is True