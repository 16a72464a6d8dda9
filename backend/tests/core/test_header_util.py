"""Alert Headers — verifies header names, i18n keys, sentences and encoding."""

from bankapi.core.header_util import (
    alert_header_names,
    create_alert,
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)

APP = "bankAccountsApp"


def test_create_alert_uses_app_name_in_header_names():
    headers = create_alert(APP, "msg", "p1")
    assert headers == {
        "X-bankAccountsApp-alert": "msg",
        "X-bankAccountsApp-params": "p1",
    }


def test_create_alert_form_encodes_param():
    headers = create_alert(APP, "msg", "a b/é")
    assert headers["X-bankAccountsApp-params"] == "a+b%2F%C3%A9"


def test_create_alert_keeps_asterisk_and_escapes_plus():
    headers = create_alert(APP, "msg", "a*b+c")
    assert headers["X-bankAccountsApp-params"] == "a*b%2Bc"


def test_failure_alert_form_encodes_entity_name():
    headers = create_failure_alert(APP, True, "bank account", "idnull", "Invalid id")
    assert headers["X-bankAccountsApp-params"] == "bank+account"


def test_entity_alerts_use_translation_keys():
    assert create_entity_creation_alert(APP, True, "bankAccount", "42")[
        "X-bankAccountsApp-alert"
    ] == "bankAccountsApp.bankAccount.created"
    assert create_entity_update_alert(APP, True, "bankAccount", "42")[
        "X-bankAccountsApp-alert"
    ] == "bankAccountsApp.bankAccount.updated"
    assert create_entity_deletion_alert(APP, True, "bankAccount", "42")[
        "X-bankAccountsApp-alert"
    ] == "bankAccountsApp.bankAccount.deleted"


def test_entity_alerts_without_translation_are_sentences():
    assert create_entity_creation_alert(APP, False, "bankAccount", "42")[
        "X-bankAccountsApp-alert"
    ] == "A new bankAccount is created with identifier 42"
    assert create_entity_update_alert(APP, False, "bankAccount", "42")[
        "X-bankAccountsApp-alert"
    ] == "A bankAccount is updated with identifier 42"
    assert create_entity_deletion_alert(APP, False, "bankAccount", "42")[
        "X-bankAccountsApp-alert"
    ] == "A bankAccount is deleted with identifier 42"


def test_entity_alerts_carry_id_as_param():
    headers = create_entity_update_alert(APP, True, "bankAccount", "42")
    assert headers["X-bankAccountsApp-params"] == "42"


def test_failure_alert_translation_key_and_entity_param():
    headers = create_failure_alert(APP, True, "bankAccount", "idnull", "Invalid id")
    assert headers == {
        "X-bankAccountsApp-error": "error.idnull",
        "X-bankAccountsApp-params": "bankAccount",
    }


def test_failure_alert_without_translation_uses_default_message():
    headers = create_failure_alert(APP, False, "bankAccount", "idnull", "Invalid id")
    assert headers["X-bankAccountsApp-error"] == "Invalid id"


def test_alert_header_names_cover_every_header():
    assert set(alert_header_names(APP)) == {
        "X-bankAccountsApp-alert",
        "X-bankAccountsApp-error",
        "X-bankAccountsApp-params",
    }
