"""Central CSS definitions for buffer-switcher."""

# Modal base styles - all modals inherit these
MODAL_CSS = """
/* Modal base positioning */
.modal-base {
    align: center middle;
}

/* Dialog container base */
.modal-base #dialog {
    height: auto;
    max-height: 90%;
    padding: 1 2;
    background: $surface;
    border: round $surface-lighten-1;
}

.modal-md #dialog {
    width: 60vw;
    min-width: 50;
    max-width: 65;
}

.modal-lg #dialog {
    width: 70vw;
    min-width: 60;
    max-width: 100;
}
"""

# Common UI patterns shared across components
COMMON_CSS = """
/* Dialog title - centered, muted */
.dialog-title {
    text-align: center;
    width: 100%;
    margin-bottom: 1;
    color: $text-muted;
}

/* Section headers inside result lists */
.section-title {
    color: $text-disabled;
    padding: 0 1;
}

/* Dialog hint text - bottom of modals */
.dialog-hint {
    text-align: center;
    color: $text-disabled;
    margin-top: 1;
}

/* Empty list placeholder */
.empty-list {
    color: $text-disabled;
    padding: 1;
    text-align: center;
}
"""

BASE_CSS = MODAL_CSS + COMMON_CSS
