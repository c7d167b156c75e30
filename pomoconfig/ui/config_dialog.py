"""Timer configuration dialog for PomoConfig.

Form on top, live preview underneath.  Nothing is written until the
user presses Save; the service validates the submission and any
violations are listed under the form.  "Restore defaults" resets the
stored configuration.
"""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QCheckBox, QPushButton,
    QFrame, QWidget,
)

from ..timer_config import DEFAULTS, LIMITS, ConfigValidationError, TimerConfigService


class ConfigDialog(QDialog):
    """Edit, save and reset the timer configuration.

    Signals
    -------
    config_changed(config: dict)
        Emitted with the public configuration after a successful save
        or reset.
    """

    config_changed = pyqtSignal(object)

    def __init__(
        self,
        service: TimerConfigService,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Timer Settings")
        self.setMinimumWidth(440)

        self._service = service
        self._config: dict | None = None

        self._build_ui()
        self.reload()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        # ── Durations section ────────────────────────────────────────
        root.addWidget(self._section_label("Durations"))
        timer_form = QFormLayout()
        timer_form.setContentsMargins(0, 0, 0, 0)
        timer_form.setHorizontalSpacing(20)
        timer_form.setVerticalSpacing(10)

        self._work_spin = self._minutes_spin("work_duration")
        timer_form.addRow("Work duration:", self._work_spin)

        self._short_spin = self._minutes_spin("short_break_duration")
        timer_form.addRow("Short break:", self._short_spin)

        self._long_spin = self._minutes_spin("long_break_duration")
        timer_form.addRow("Long break:", self._long_spin)

        root.addLayout(timer_form)

        # ── separator ────────────────────────────────────────────────
        root.addWidget(self._separator())

        # ── Advanced section ─────────────────────────────────────────
        root.addWidget(self._section_label("Advanced"))
        adv_form = QFormLayout()
        adv_form.setContentsMargins(0, 0, 0, 0)
        adv_form.setHorizontalSpacing(20)

        self._advanced_cb = QCheckBox("Enable advanced settings")
        self._advanced_cb.toggled.connect(self._on_advanced_toggled)
        adv_form.addRow("", self._advanced_cb)

        cycles = LIMITS["cycles_before_long_break"]
        self._cycles_spin = QSpinBox()
        self._cycles_spin.setRange(cycles.minimum, cycles.maximum)
        self._cycles_label = QLabel("Cycles before long break:")
        adv_form.addRow(self._cycles_label, self._cycles_spin)

        self._default_cycles_hint = QLabel(
            f"Using default: {DEFAULTS.cycles_before_long_break} cycles "
            "before the long break (classic Pomodoro)"
        )
        self._default_cycles_hint.setWordWrap(True)
        self._default_cycles_hint.setStyleSheet("color: #7A7A9A;")
        adv_form.addRow("", self._default_cycles_hint)

        root.addLayout(adv_form)

        # ── errors ───────────────────────────────────────────────────
        self._error_label = QLabel("")
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet("color: #F38BA8;")
        self._error_label.hide()
        root.addWidget(self._error_label)

        # ── separator ────────────────────────────────────────────────
        root.addWidget(self._separator())

        # ── Preview section ──────────────────────────────────────────
        root.addWidget(self._section_label("Preview"))
        self._preview_work = QLabel("")
        self._preview_intervals = QLabel("")
        self._preview_cycles = QLabel("")
        for lbl in (self._preview_work, self._preview_intervals, self._preview_cycles):
            root.addWidget(lbl)

        # ── buttons ──────────────────────────────────────────────────
        root.addStretch()
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._reset_btn = QPushButton("Restore defaults")
        self._reset_btn.setObjectName("secondaryButton")
        self._reset_btn.clicked.connect(self.restore_defaults)
        btn_row.addWidget(self._reset_btn)
        self._save_btn = QPushButton("Save")
        self._save_btn.setDefault(True)
        self._save_btn.clicked.connect(self.save)
        btn_row.addWidget(self._save_btn)
        root.addLayout(btn_row)

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _minutes_spin(field: str) -> QSpinBox:
        limits = LIMITS[field]
        spin = QSpinBox()
        spin.setRange(limits.minimum, limits.maximum)
        spin.setSuffix(" min")
        return spin

    @staticmethod
    def _section_label(text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setStyleSheet("font-size: 15px; font-weight: 700; margin-top: 4px;")
        return lbl

    @staticmethod
    def _separator() -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFixedHeight(1)
        line.setStyleSheet("background-color: rgba(255,255,255,0.08);")
        return line

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE FROM SERVICE
    # ══════════════════════════════════════════════════════════════════

    def reload(self) -> None:
        """Re-read the stored configuration into the form and preview."""
        self._populate(self._service.get_configuration())

    def _populate(self, config: dict) -> None:
        self._config = config
        self._work_spin.setValue(config["workDuration"])
        self._short_spin.setValue(config["shortBreakDuration"])
        self._long_spin.setValue(config["longBreakDuration"])
        self._cycles_spin.setValue(config["cyclesBeforeLongBreak"])
        self._advanced_cb.setChecked(config["advancedConfigActive"])
        self._on_advanced_toggled(config["advancedConfigActive"])
        self._refresh_preview()

    def _refresh_preview(self) -> None:
        preview = self._service.preview_configuration()
        self._preview_work.setText(preview["workCycle"])
        self._preview_intervals.setText(preview["intervals"])
        self._preview_cycles.setText(preview["cycles"])

    # ══════════════════════════════════════════════════════════════════
    #  CHANGE HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _on_advanced_toggled(self, checked: bool) -> None:
        self._cycles_label.setVisible(checked)
        self._cycles_spin.setVisible(checked)
        self._default_cycles_hint.setVisible(not checked)

    def form_values(self) -> dict:
        """The payload Save would submit.

        Cycles are only sent in advanced mode; otherwise the default
        applies.
        """
        values = {
            "workDuration": self._work_spin.value(),
            "shortBreakDuration": self._short_spin.value(),
            "longBreakDuration": self._long_spin.value(),
            "advancedConfigActive": self._advanced_cb.isChecked(),
        }
        if self._advanced_cb.isChecked():
            values["cyclesBeforeLongBreak"] = self._cycles_spin.value()
        return values

    def save(self) -> bool:
        try:
            config = self._service.update_configuration(self.form_values())
        except ConfigValidationError as exc:
            self.show_violations(exc)
            return False
        self._clear_errors()
        self._populate(config)
        self.config_changed.emit(config)
        return True

    def restore_defaults(self) -> None:
        config = self._service.reset_configuration()
        self._clear_errors()
        self._populate(config)
        self.config_changed.emit(config)

    def show_violations(self, error: ConfigValidationError) -> None:
        self._error_label.setText(
            "\n".join(f"{v.field}: {v.message}" for v in error.violations)
        )
        self._error_label.show()

    def _clear_errors(self) -> None:
        self._error_label.clear()
        self._error_label.hide()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def config(self) -> dict | None:
        return self._config
