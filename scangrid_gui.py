#!/usr/bin/env python3
"""
scangrid_gui.py — small Tk front-end for scangrid.generate

Features
- Add images (multi-select), Clear
- Bar width spinner (1..50)
- Create Animation: asks for an output folder, writes output.png + mask.png there

Requires:
  pip install pillow numpy
"""

import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Optional

from scangrid.DataModel import ImageSelection
from scangrid.Errors import ScangridError
from scangrid.Generate import generate


# -----------------------------
# App
# -----------------------------

class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Scangrid")
        self.geometry("400x360")

        # Selected files, in animation order
        self.selection = ImageSelection()

        self.bar_width = tk.IntVar(value=1)

        # UI widgets we reference later
        self.files_list: Optional[tk.Listbox] = None
        self.status: Optional[ttk.Label] = None

        self._build_ui()

    # ---------------- UI ----------------

    def _build_ui(self):
        root = ttk.Frame(self, padding=5)
        root.pack(fill=tk.BOTH, expand=True)

        ttk.Label(root, text="Images:", font=("TkDefaultFont", 9, "italic")).pack(anchor="w")

        self.files_list = tk.Listbox(root, height=12, exportselection=False)
        self.files_list.pack(fill=tk.BOTH, expand=True, pady=(4, 6))

        buttons = ttk.Frame(root)
        buttons.pack(fill=tk.X)
        ttk.Button(buttons, text="Add images", command=self.add_images).pack(side=tk.LEFT, fill=tk.X, expand=True)
        tk.Button(buttons, text="Clear", command=self.clear_images, bg="#fa3232", fg="#fafafa").pack(
            side=tk.LEFT, fill=tk.X, expand=True, padx=(6, 0)
        )

        run = ttk.Frame(root)
        run.pack(fill=tk.X, pady=(6, 0))
        ttk.Spinbox(run, from_=1, to=50, textvariable=self.bar_width, width=6).pack(side=tk.LEFT)
        tk.Button(
            run,
            text="Create Animation",
            command=self.create_animation,
            bg="#32fa32",
            font=("TkDefaultFont", 10, "bold"),
        ).pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(6, 0))

        self.status = ttk.Label(root, text="")
        self.status.pack(anchor="w", pady=(6, 0))

    def refresh_files_list(self):
        if not self.files_list:
            return
        self.files_list.delete(0, tk.END)
        for p in self.selection.paths:
            self.files_list.insert(tk.END, p)

    # ---------------- Actions ----------------

    def add_images(self):
        paths = filedialog.askopenfilenames(
            title="Select images...",
            filetypes=[("Images", "*.png *.jpg *.jpeg"), ("All files", "*.*")],
        )
        if not paths:
            return
        self.selection.add(paths)
        self.refresh_files_list()
        self._set_status(f"{len(self.selection)} image(s) selected.")

    def clear_images(self):
        self.selection.clear()
        self.refresh_files_list()
        self._set_status("")

    def create_animation(self):
        if not self.selection.is_ready():
            messagebox.showerror("Error", "Need at least two images")
            return

        try:
            bar_width = int(self.bar_width.get())
        except (tk.TclError, ValueError):
            messagebox.showerror("Error", "Bar width must be a number.")
            return

        out_dir = filedialog.askdirectory(title="Select output folder...", mustexist=True)
        if not out_dir:
            return

        self._set_status("Generating…")
        self.update_idletasks()
        try:
            result = generate(self.selection.paths, out_dir, bar_width)
        except ScangridError as e:
            self._set_status("Error.")
            messagebox.showerror("Error", str(e))
            return

        self._set_status(f"Saved {result.output_path} and {result.mask_path}")
        messagebox.showinfo("Ok", f"Animation generated on {out_dir}")

    def _set_status(self, text: str):
        if self.status:
            self.status.configure(text=text)


if __name__ == "__main__":
    App().mainloop()
