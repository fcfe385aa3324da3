# newrial/services/converter_service.py
# -*- coding: utf-8 -*-
"""
ConverterService: event-driven input handling & result publishing.

Listens:
  - AmountEdited(field="old" | "new" | "qeran", text="...")
  - DirectionSwapped()
  - LanguageChanged(lang="fa" | "en")

Publishes:
  - ConversionUpdated(view: ConversionView)

Notes:
  - Holds only the three input fields, the direction and the language; every
    number on screen is recomputed from those on each change.
  - All arithmetic and text rendering is delegated to newrial.utils.money.
  - Works with the DI registrations in core/di.py ("bus", "settings").
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict

from newrial.config.constants import QERAN_INPUT_DIGITS
from newrial.config.i18n import t
from newrial.config.settings import SettingsManager
from newrial.core.events import (
    EventBus,
    AmountEdited,
    DirectionSwapped,
    LanguageChanged,
    ConversionUpdated,
)
from newrial.utils.money import (
    ConversionResult,
    convert_old_text,
    convert_new_text,
    format_localized,
    format_small,
    regroup_input,
    amount_in_words,
    rial_in_words,
)

logger = logging.getLogger(__name__)

MODE_OLD_TO_NEW = "old_to_new"
MODE_NEW_TO_OLD = "new_to_old"

FIELDS = ("old", "new", "qeran")


@dataclass(frozen=True)
class ConversionView:
    """Everything the result card shows, already localized."""
    mode: str
    lang: str
    result: ConversionResult
    old_input: str
    new_input: str
    qeran_input: str
    headline: str
    words: str
    toman: str


class ConverterService:
    """Keeps the raw input fields and publishes ConversionUpdated on every change."""

    def __init__(self, bus: EventBus, settings: SettingsManager):
        self.bus = bus
        self.settings = settings
        self._inputs: Dict[str, str] = {name: "" for name in FIELDS}

        self.bus.subscribe(AmountEdited, self._on_amount_edited)
        self.bus.subscribe(DirectionSwapped, self._on_direction_swapped)
        self.bus.subscribe(LanguageChanged, self._on_language_changed)

    # ---------- public API ----------
    @property
    def lang(self) -> str:
        return self.settings.lang()

    @property
    def reverse(self) -> bool:
        return self.settings.reverse()

    def input_text(self, field: str) -> str:
        """Return the formatted text currently shown in `field`."""
        return self._inputs[field]

    def edit(self, field: str, text: str) -> ConversionView:
        """Reformat a keystroke into `field` and publish the new conversion.

        Unknown field names are ignored (the current view is re-published).
        """
        if field in self._inputs:
            limit = QERAN_INPUT_DIGITS if field == "qeran" else None
            self._inputs[field] = regroup_input(text, self.lang, max_digits=limit)
        else:
            logger.debug("ignoring edit of unknown field %r", field)
        return self._publish()

    def swap(self) -> ConversionView:
        """Flip the conversion direction."""
        self.settings.set_reverse(not self.reverse)
        return self._publish()

    def set_lang(self, lang: str) -> ConversionView:
        """Switch language and re-render non-empty inputs in its digits/separators."""
        self.settings.set_lang(lang)
        for name, text in self._inputs.items():
            if text:
                limit = QERAN_INPUT_DIGITS if name == "qeran" else None
                self._inputs[name] = regroup_input(text, self.lang, max_digits=limit)
        return self._publish()

    def current_view(self) -> ConversionView:
        """Compute the view for the current inputs without publishing."""
        lang = self.lang
        if not self.reverse:
            result = convert_old_text(self._inputs["old"])
            return ConversionView(
                mode=MODE_OLD_TO_NEW,
                lang=lang,
                result=result,
                old_input=self._inputs["old"],
                new_input=self._inputs["new"],
                qeran_input=self._inputs["qeran"],
                headline=self._headline_new(result, lang),
                words=self._words_new(result, lang),
                toman=self._toman_line(result, lang),
            )
        result = convert_new_text(self._inputs["new"], self._inputs["qeran"])
        return ConversionView(
            mode=MODE_NEW_TO_OLD,
            lang=lang,
            result=result,
            old_input=self._inputs["old"],
            new_input=self._inputs["new"],
            qeran_input=self._inputs["qeran"],
            headline=f"{format_localized(result.old_amount, lang)} {t('result_old', lang)}",
            words=self._words_old(result, lang),
            toman=self._toman_line(result, lang),
        )

    # ---------- event handlers ----------
    def _on_amount_edited(self, evt: AmountEdited) -> None:
        self.edit(evt.field, evt.text)

    def _on_direction_swapped(self, _evt: DirectionSwapped) -> None:
        self.swap()

    def _on_language_changed(self, evt: LanguageChanged) -> None:
        self.set_lang(evt.lang)

    # ---------- shaping ----------
    @staticmethod
    def _headline_new(result: ConversionResult, lang: str) -> str:
        unit = t("new_rial", lang) if lang == "fa" else t("result_new", lang)
        return (
            f"{format_localized(result.new_amount, lang)} {unit} {t('and', lang)} "
            f"{format_small(result.qeran, lang)} {t('qeran', lang)}"
        )

    @staticmethod
    def _words_new(result: ConversionResult, lang: str) -> str:
        label = t("letters_new", lang)
        if lang == "fa":
            return f"{label}: {amount_in_words(result.new_amount, result.qeran)}"
        out = f"{label}: {format_localized(result.new_amount, 'en')} rial(s)"
        if result.qeran > 0:
            out += f" and {result.qeran} qeran"
        return out

    @staticmethod
    def _words_old(result: ConversionResult, lang: str) -> str:
        label = t("letters_old", lang)
        if lang == "fa":
            return f"{label}: {rial_in_words(result.old_amount)}"
        return f"{label}: {format_localized(result.old_amount, 'en')} rial(s)"

    @staticmethod
    def _toman_line(result: ConversionResult, lang: str) -> str:
        return t("approx_toman", lang).replace("_", format_localized(result.old_toman, lang))

    def _publish(self) -> ConversionView:
        view = self.current_view()
        logger.debug("conversion updated: mode=%s lang=%s qeran=%d", view.mode, view.lang, view.result.qeran)
        self.bus.publish(ConversionUpdated(view=view))
        return view
