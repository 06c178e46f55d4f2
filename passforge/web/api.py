from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request

from passforge.generator import PasswordGenerator, PasswordRequest
from passforge.passphrase import PassphraseGenerator, PassphraseRequest
from passforge.settings import MemorySettingsStore, SettingsStore

FLAGS = ('include_uppercase', 'include_lowercase', 'include_numbers', 'include_special_chars')

def _int_field(data: Dict[str, Any], name: str, default: int) -> int:
    value = data.get(name, default)
    # bool is an int subclass; "length": true is not a length
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer")
    return value

def _bool_field(data: Dict[str, Any], name: str, default: bool) -> bool:
    value = data.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{name}' must be true or false")
    return value

def _str_field(data: Dict[str, Any], name: str, default: str) -> str:
    value = data.get(name, default)
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string")
    return value

def _flags(data: Dict[str, Any]) -> Dict[str, bool]:
    return {f: _bool_field(data, f, f == 'include_lowercase') for f in FLAGS}

def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data

def _store() -> SettingsStore:
    return current_app.config['SETTINGS_STORE']

def create_app(store: Optional[SettingsStore] = None) -> Flask:
    app = Flask(__name__)
    app.config['SETTINGS_STORE'] = store or MemorySettingsStore()

    @app.errorhandler(ValueError)
    def handle_error(e):
        return jsonify({'error': str(e)}), 400

    @app.route('/')
    def home():
        return jsonify({"message": "PassForge API is running"})

    @app.route('/password', methods=['POST'])
    def password_route():
        data = _json_body()
        req = PasswordRequest(
            length=_int_field(data, 'length', 16),
            exclude_characters=_str_field(data, 'exclude_characters', ''),
            is_regenerate=_bool_field(data, 'is_regenerate', False),
            **_flags(data)
        )
        return jsonify({'password': PasswordGenerator(_store()).generate(req)})

    @app.route('/passphrase', methods=['POST'])
    def passphrase_route():
        data = _json_body()
        req = PassphraseRequest(
            word_count=_int_field(data, 'word_count', 4),
            separator=_str_field(data, 'separator', '-'),
            is_regenerate=_bool_field(data, 'is_regenerate', False),
            **_flags(data)
        )
        return jsonify({'passphrase': PassphraseGenerator(_store()).generate(req)})

    @app.route('/settings', methods=['GET'])
    def settings_route():
        store = _store()
        return jsonify({
            'password': store.get_password_settings().to_dict(),
            'passphrase': store.get_passphrase_settings().to_dict(),
        })

    return app

if __name__ == "__main__":
    create_app().run(debug=True)
