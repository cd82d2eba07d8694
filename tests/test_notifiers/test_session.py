"""
Heads Up - Session Flash Notifier Tests
"""

from headsup.notifiers import Message, SessionNotifier

KEY = "headsup.flash"


class TestSessionNotifier:
    """Tests for flash messages surviving exactly one request."""
    
    def test_non_flash_message_is_request_scoped(self):
        session = {}
        notifier = SessionNotifier(session, key=KEY)
        
        notifier.alert("foo", "info")
        
        assert notifier.all() == [Message("foo", "info")]
        assert KEY not in session
    
    def test_flash_message_visible_on_next_request(self):
        session = {}
        
        first = SessionNotifier(session, key=KEY)
        first.alert("saved", "success", "header", is_flash=True)
        
        assert first.all() == []
        assert first.pending() == [Message("saved", "success", "header")]
        
        second = SessionNotifier(session, key=KEY)
        assert second.all() == [Message("saved", "success", "header")]
        assert KEY not in session
        
        third = SessionNotifier(session, key=KEY)
        assert third.all() == []
    
    def test_flashed_messages_come_first(self):
        session = {KEY: [Message("old", "info").to_dict()]}
        notifier = SessionNotifier(session, key=KEY)
        
        notifier.alert("new", "info")
        
        assert [m.text for m in notifier.all()] == ["old", "new"]
    
    def test_session_holds_plain_dicts(self):
        session = {}
        notifier = SessionNotifier(session, key=KEY)
        
        notifier.alert(["a", "b"], "error", is_flash=True, extra="bucket")
        
        assert session[KEY] == [
            {"text": "a", "type": "error", "area": "default", "extra": "bucket"},
            {"text": "b", "type": "error", "area": "default", "extra": "bucket"},
        ]
    
    def test_reflash_keeps_messages_one_more_request(self):
        session = {KEY: [Message("old", "warning").to_dict()]}
        
        notifier = SessionNotifier(session, key=KEY)
        notifier.reflash()
        
        assert SessionNotifier(session, key=KEY).all() == [Message("old", "warning")]
    
    def test_flashed_form_errors(self):
        session = {}
        
        SessionNotifier(session, key=KEY).alert({"email": "Required"}, "error", "form", is_flash=True)
        
        notifier = SessionNotifier(session, key=KEY)
        assert notifier.form("email") == "Required"
        assert notifier.form("name") is None
