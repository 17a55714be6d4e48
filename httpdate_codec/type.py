from typing import TYPE_CHECKING, Type, Union

from typing_extensions import Protocol

if TYPE_CHECKING:
    from httpdate_codec.note import Note  # pylint: disable=cyclic-import


class AddNoteMethodType(Protocol):
    def __call__(self, note_cls: Type["Note"], **vrs: Union[str, int]) -> None: ...
