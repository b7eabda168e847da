from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from FrontEnd.styles.design_tokens import COLORS

class FooterSessions(QWidget):
    def __init__(self, completed=0):
        super().__init__()
        layout = QHBoxLayout()
        layout.addStretch()
        self.label = QLabel()
        self.label.setObjectName("SessionsLabel")
        layout.addWidget(self.label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['footer_bg']}; border-radius: 16px; padding: 8px 24px; margin: 0 32px 32px 0; color: {COLORS['footer_text']}; font-size: 16px; font-weight: 500;")
        self.set_completed(completed)
    def set_completed(self, count):
        self.completed = count
        self.label.setText(f"Focus sessions completed: {count}")
