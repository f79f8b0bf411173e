import dataclasses
import json
import logging
import pathlib
import typing

import cattrs
import cattrs.gen
import msgspec

from .commontypes import BOTTOM_CENTER, Alignment
from .controller import KeyboardController
from .layouts import DEFAULT_LAYOUTS, KeyboardLayout


def structure_alignment(v: typing.Union[str, dict], typ: type[Alignment]):
    if isinstance(v, str):
        return Alignment.named(v)
    return msgspec.convert(v, Alignment)


def unstructure_alignment(alignment: Alignment):
    name = alignment.name
    if name is not None:
        return name
    return msgspec.to_builtins(alignment)


settings_converter = cattrs.Converter()
settings_converter.register_structure_hook(KeyboardLayout, lambda v, _: msgspec.convert(v, KeyboardLayout))
settings_converter.register_unstructure_hook(KeyboardLayout, msgspec.to_builtins)
settings_converter.register_structure_hook(Alignment, structure_alignment)
settings_converter.register_unstructure_hook(Alignment, unstructure_alignment)


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    # insertion order is the order switchLayout cycles through
    layouts: dict[str, KeyboardLayout]
    alignment: Alignment = BOTTOM_CENTER
    initially_open: bool = False
    log_level: str = "INFO"

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def make_controller(self) -> KeyboardController:
        return KeyboardController(self.layouts, alignment=self.alignment, initially_open=self.initially_open)

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        dest.write_text(json.dumps(raw, indent=2, ensure_ascii=False), encoding="utf-8")

    @classmethod
    def load(cls, src: pathlib.Path):
        raw = json.loads(src.read_text(encoding="utf-8"))
        raw["_path"] = src
        return settings_converter.structure(raw, cls)

    @classmethod
    def for_test(cls):
        return cls(
            _path=pathlib.Path("test.settings.json"),
            layouts=dict(DEFAULT_LAYOUTS),
            alignment=BOTTOM_CENTER,
        )


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
