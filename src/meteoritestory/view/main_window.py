"""
Main Application Window
=======================
The chrome around the scene canvas: title, Prev/Next navigation and the
Explore-only filter panel.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects widget signals to the dispatcher entry points and the
   dispatcher's output signals back to the widgets. It never renders a scene
   itself.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox, QHBoxLayout, QLabel, QMainWindow, QPushButton, QSlider, QVBoxLayout, QWidget
)

from meteoritestory.config import ALL_CLASSES, DEFAULT_VIEWPORT
from meteoritestory.controller import aggregate
from meteoritestory.controller.dispatcher import SceneDispatcher
from meteoritestory.view.widgets.scene_canvas import SceneCanvas

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Meteorite Landings"


class MainWindow(QMainWindow):
    def __init__(self, dispatcher: SceneDispatcher) -> None:
        super().__init__()
        self.dispatcher = dispatcher
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*DEFAULT_VIEWPORT)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- TOP BAR: Title + navigation ---
        top_bar = QHBoxLayout()
        self.btn_prev = QPushButton("◀ Prev")
        self.btn_next = QPushButton("Next ▶")
        self.lbl_title = QLabel()
        self.lbl_title.setAlignment(Qt.AlignCenter)
        self.lbl_title.setStyleSheet("QLabel { font-size: 18px; font-weight: bold; }")
        top_bar.addWidget(self.btn_prev)
        top_bar.addWidget(self.lbl_title, 1)
        top_bar.addWidget(self.btn_next)
        main_layout.addLayout(top_bar)

        # --- EXPLORE PANEL ---
        self.explore_panel = self._build_explore_panel()
        main_layout.addWidget(self.explore_panel)

        # --- CANVAS ---
        self.canvas = SceneCanvas()
        main_layout.addWidget(self.canvas, 1)

        self._connect_signals()

    def _build_explore_panel(self) -> QWidget:
        panel = QWidget()
        layout = QHBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)

        extent = aggregate.year_extent(self.dispatcher.records) or (0, 0)
        layout.addWidget(QLabel("From year:"))
        self.slider_year = QSlider(Qt.Horizontal)
        self.slider_year.setRange(*extent)
        self.slider_year.setValue(self.dispatcher.state.filter_year)
        layout.addWidget(self.slider_year, 1)

        self.lbl_year = QLabel(str(self.slider_year.value()))
        self.lbl_year.setMinimumWidth(40)
        layout.addWidget(self.lbl_year)

        layout.addWidget(QLabel("Class:"))
        self.combo_class = QComboBox()
        self.combo_class.addItem(ALL_CLASSES)
        self.combo_class.addItems(aggregate.distinct_classes(self.dispatcher.records))
        layout.addWidget(self.combo_class)

        panel.setVisible(self.dispatcher.state.explore_controls_visible)
        return panel

    def _connect_signals(self) -> None:
        d = self.dispatcher

        # Widgets -> dispatcher
        self.btn_next.clicked.connect(d.on_next)
        self.btn_prev.clicked.connect(d.on_prev)
        self.slider_year.valueChanged.connect(self.on_filter_widgets_changed)
        self.combo_class.currentTextChanged.connect(self.on_filter_widgets_changed)
        self.canvas.resized.connect(d.on_resize)
        self.canvas.point_entered.connect(d.on_pointer_enter)
        self.canvas.point_left.connect(d.on_pointer_leave)

        # Dispatcher -> widgets
        d.title_changed.connect(self.lbl_title.setText)
        d.controls_visible_changed.connect(self.explore_panel.setVisible)
        d.navigation_changed.connect(self.on_navigation_changed)
        d.frame_changed.connect(self.canvas.set_frame)
        d.tooltip.changed.connect(self.canvas.show_tooltip)
        d.tooltip.set_measure(self.canvas.measure_tooltip)

    def on_filter_widgets_changed(self, *_: object) -> None:
        self.lbl_year.setText(str(self.slider_year.value()))
        self.dispatcher.on_filter_changed(self.slider_year.value(), self.combo_class.currentText())

    def on_navigation_changed(self, can_go_back: bool, can_go_forward: bool) -> None:
        self.btn_prev.setEnabled(can_go_back)
        self.btn_next.setEnabled(can_go_forward)

    def start(self, viewport: Optional[tuple[float, float]] = None) -> None:
        """Show the window and draw the first scene."""
        self.show()
        if viewport is None:
            size = self.canvas.viewport().size()
            viewport = (float(size.width()), float(size.height()))
        self.dispatcher.on_resize(*viewport)
