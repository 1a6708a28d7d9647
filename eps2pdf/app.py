from __future__ import annotations

import os
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Optional

from .config import Settings
from .converter import convert
from .models import ConversionResult, Orientation
from .pdf_info import read_page_info, render_preview

APP_TITLE = "EPS to PDF"

ORIENTATION_LABELS = [
    (Orientation.NONE, "Keep orientation"),
    (Orientation.FLIP, "Flip orientation"),
    (Orientation.REMOVE, "Remove orientation"),
]


class ConverterApp(ttk.Frame):
    def __init__(self, master: tk.Tk, settings: Optional[Settings] = None) -> None:
        super().__init__(master)
        self.settings = settings or Settings()
        self.master.title(APP_TITLE)
        self.master.geometry("820x520")
        self.master.minsize(640, 420)
        self.pack(fill="both", expand=True)
        self._preview_image: Optional[tk.PhotoImage] = None
        self._last_pdf: Optional[str] = None
        self._create_style()
        self._create_variables()
        self._build_layout()
        self.set_status("Ready")

    def _create_style(self) -> None:
        style = ttk.Style()
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        style.configure("TLabel", font=("Segoe UI", 10))
        style.configure("TButton", font=("Segoe UI", 10))
        style.configure("Header.TLabel", font=("Segoe UI", 12, "bold"))
        style.configure("Status.TLabel", font=("Segoe UI", 9))

    def _create_variables(self) -> None:
        self.eps_path_var = tk.StringVar(value="")
        self.gs_path_var = tk.StringVar(value=self.settings.ghostscript_path or "")
        self.orientation_var = tk.IntVar(value=self.settings.orientation)
        self.page_info_var = tk.StringVar(value="Page size: --")
        self.status_var = tk.StringVar()
        self.progress_var = tk.DoubleVar(value=0.0)
        self.preview_canvas: Optional[tk.Canvas] = None

    def _build_layout(self) -> None:
        container = ttk.Frame(self)
        container.pack(fill="both", expand=True, padx=16, pady=16)
        container.columnconfigure(0, weight=2)
        container.columnconfigure(1, weight=3)
        container.rowconfigure(0, weight=1)

        self._build_inputs(container)
        self._build_preview(container)
        self._build_footer()

    def _build_inputs(self, parent: ttk.Frame) -> None:
        frame = ttk.LabelFrame(parent, text="Conversion")
        frame.grid(row=0, column=0, sticky="nsew", padx=(0, 12))
        frame.columnconfigure(0, weight=1)

        row = 0
        ttk.Label(frame, text="EPS file:").grid(row=row, column=0, columnspan=2, sticky="w", pady=(4, 0))
        row += 1
        ttk.Entry(frame, textvariable=self.eps_path_var).grid(row=row, column=0, sticky="ew", pady=4)
        ttk.Button(frame, text="Browse", command=self._choose_eps).grid(row=row, column=1, sticky="ew", padx=(6, 0))

        row += 1
        ttk.Label(frame, text="Ghostscript (optional):").grid(row=row, column=0, columnspan=2, sticky="w", pady=(8, 0))
        row += 1
        ttk.Entry(frame, textvariable=self.gs_path_var).grid(row=row, column=0, sticky="ew", pady=4)
        ttk.Button(frame, text="Browse", command=self._choose_ghostscript).grid(
            row=row, column=1, sticky="ew", padx=(6, 0)
        )

        row += 1
        ttk.Separator(frame, orient="horizontal").grid(row=row, column=0, columnspan=2, sticky="ew", pady=(12, 6))
        row += 1
        ttk.Label(frame, text="Orientation", style="Header.TLabel").grid(row=row, column=0, columnspan=2, sticky="w")
        for mode, label in ORIENTATION_LABELS:
            row += 1
            ttk.Radiobutton(frame, text=label, value=int(mode), variable=self.orientation_var).grid(
                row=row, column=0, columnspan=2, sticky="w", pady=2
            )

        row += 1
        ttk.Button(frame, text="Convert to PDF", command=self._convert).grid(
            row=row, column=0, columnspan=2, sticky="ew", pady=(16, 4)
        )
        row += 1
        ttk.Label(frame, textvariable=self.page_info_var).grid(row=row, column=0, columnspan=2, sticky="w", pady=(4, 0))

    def _build_preview(self, parent: ttk.Frame) -> None:
        frame = ttk.LabelFrame(parent, text="Result preview")
        frame.grid(row=0, column=1, sticky="nsew")
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(0, weight=1)
        canvas = tk.Canvas(
            frame,
            background="#f9f9fb",
            highlightthickness=1,
            highlightbackground="#c6c6c6",
        )
        canvas.grid(row=0, column=0, sticky="nsew", padx=8, pady=8)
        canvas.bind("<Configure>", lambda event: self.update_preview())
        self.preview_canvas = canvas

    def _build_footer(self) -> None:
        footer = ttk.Frame(self)
        footer.pack(fill="x", padx=16, pady=(0, 12))
        progress = ttk.Progressbar(footer, variable=self.progress_var, maximum=100)
        progress.pack(fill="x", side="top")
        status = ttk.Label(footer, textvariable=self.status_var, style="Status.TLabel")
        status.pack(fill="x", side="top", pady=(4, 0))

    def set_status(self, message: str) -> None:
        self.status_var.set(message)
        self.master.update_idletasks()

    def set_progress(self, value: float) -> None:
        self.progress_var.set(value)
        self.master.update_idletasks()

    def _choose_eps(self) -> None:
        file_path = filedialog.askopenfilename(
            title="Select EPS file",
            filetypes=[("Encapsulated PostScript", "*.eps"), ("All files", "*.*")],
        )
        if file_path:
            self.eps_path_var.set(file_path)

    def _choose_ghostscript(self) -> None:
        file_path = filedialog.askopenfilename(title="Select Ghostscript executable")
        if file_path:
            self.gs_path_var.set(file_path)

    def _convert(self) -> None:
        eps_path = self.eps_path_var.get().strip()
        if not eps_path:
            messagebox.showwarning("Missing file", "Please select an EPS file to convert.")
            return
        self.set_status(f"Converting {os.path.basename(eps_path)}…")
        self.set_progress(10)
        self._set_busy(True)
        try:
            result = convert(
                eps_path,
                self.gs_path_var.get().strip() or None,
                self.orientation_var.get(),
            )
        finally:
            self._set_busy(False)
        self._show_result(result)

    def _show_result(self, result: ConversionResult) -> None:
        if not result.ok:
            self.set_progress(0)
            self.set_status("Conversion failed")
            messagebox.showerror("Conversion failed", result.message)
            return
        self.set_progress(100)
        self.set_status(f"{result.message}: {result.target}")
        self._last_pdf = result.target
        try:
            info = read_page_info(result.target)
        except Exception as exc:  # noqa: BLE001
            self.page_info_var.set(f"Page size unavailable: {exc}")
            return
        self.page_info_var.set(f"Page size: {info.describe()}")
        self.update_preview()

    def update_preview(self) -> None:
        canvas = self.preview_canvas
        if canvas is None:
            return
        canvas.delete("all")
        width = int(canvas.winfo_width())
        height = int(canvas.winfo_height())
        if width <= 20 or height <= 20:
            return
        if not self._last_pdf:
            self._render_preview_message(canvas, width, height, "Convert a file to see the result")
            return
        try:
            preview = render_preview(self._last_pdf, width - 20, height - 20)
        except Exception as exc:  # noqa: BLE001
            self._render_preview_message(canvas, width, height, f"Preview unavailable: {exc}")
            return
        self._preview_image = tk.PhotoImage(data=preview.ppm)
        canvas.create_image(width / 2, height / 2, image=self._preview_image)

    def _render_preview_message(self, canvas: tk.Canvas, width: int, height: int, message: str) -> None:
        canvas.create_text(
            width / 2,
            height / 2,
            text=message,
            fill="#8a8a8a",
            font=("Segoe UI", 11),
        )

    def _set_busy(self, busy: bool) -> None:
        state = "disabled" if busy else "normal"
        for child in self.winfo_children():
            self._set_state_recursive(child, state)
        self.update_idletasks()

    def _set_state_recursive(self, widget: tk.Widget, state: str) -> None:
        if isinstance(widget, (ttk.Button, ttk.Entry, ttk.Radiobutton)):
            widget.state([state]) if state == "disabled" else widget.state(["!disabled"])
        for child in widget.winfo_children():
            self._set_state_recursive(child, state)


def run_app(settings: Optional[Settings] = None) -> None:
    root = tk.Tk()
    ConverterApp(root, settings)
    root.mainloop()


__all__ = ["ConverterApp", "run_app"]
