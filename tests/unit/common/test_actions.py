from shambago.common.actions import FeatureAction, QuickAction


def test_actions_carry_titles_and_icons():
    assert FeatureAction.SOIL_HEALTH.title == "Soil Health"
    assert QuickAction.SCAN_CROP.title == "Scan Crop"
    assert all(action.icon for action in FeatureAction)


def test_titles_are_unique():
    titles = [a.title for a in FeatureAction] + [a.title for a in QuickAction]
    assert len(titles) == len(set(titles))
