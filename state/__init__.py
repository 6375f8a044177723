from state.store import FormStore, FORM_KEY
from state.controller import ViewController

__all__ = ["FormStore", "FORM_KEY", "ViewController"]
