from meteoritestory.model.state import FIRST_SCENE, LAST_SCENE, SCENE_TITLES, Scene, SceneState


def test_step_is_clamped():
    state = SceneState()
    assert not state.step(-1)
    assert state.index == FIRST_SCENE
    assert state.step(+1)
    assert state.step(+5)
    assert state.index == LAST_SCENE
    assert not state.step(+1)


def test_titles_and_controls():
    state = SceneState(index=Scene.GEO_DISTRIBUTION)
    assert state.title == "3 Global Distribution by Mass"
    assert not state.explore_controls_visible
    state.step(+1)
    assert state.explore_controls_visible
    assert len(SCENE_TITLES) == 4
