from shambago.common.localization import Language, Localizer


def test_defaults_to_english(store):
    localizer = Localizer(store)

    assert localizer.language is Language.ENGLISH
    assert localizer.translate("Sign In") == "Sign In"


def test_set_language_persists(store):
    Localizer(store).set_language(Language.SWAHILI)

    assert store["AppLanguage"] == "sw"
    assert Localizer(store).translate("Sign In") == "Ingia"


def test_unknown_key_returns_key(store):
    localizer = Localizer(store)
    localizer.set_language(Language.SWAHILI)

    assert localizer.translate("Harvest Calendar") == "Harvest Calendar"


def test_unknown_stored_language_falls_back(store):
    store["AppLanguage"] = "fr"

    assert Localizer(store).language is Language.ENGLISH
