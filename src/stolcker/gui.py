import logging
import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from .fetcher import fetch_stock
from .plotter import candle_geometry, plot_stock, WICK_COLOR
from .state import AppState

logger = logging.getLogger(__name__)

HEADER_HEIGHT = 50
BUTTON_WIDTH = 50
BACKGROUND = '#e6e6e6'


class StolckerUI(tk.Tk):
    def __init__(self, state: AppState, fetch=fetch_stock):
        super().__init__()
        self.app_state = state
        self.fetch = fetch
        self.title("Stolcker")
        self.geometry("900x600")

        self.header = ttk.Frame(self, height=HEADER_HEIGHT)
        self.header.pack(fill='x')
        self.header.pack_propagate(False)

        self.body = ttk.Frame(self)
        self.body.pack(fill='both', expand=True)

        self.build_view_row()
        self.build_edit_row()
        self.build_body()
        self.refresh()

    # Header
    def build_view_row(self):
        row = ttk.Frame(self.header)
        self.view_row = row

        self.meta_label = ttk.Label(row, anchor='e', padding=5)
        self.meta_label.pack(side='right', fill='x', expand=True)
        self.name_btn = tk.Button(row, font=('TkDefaultFont', 18), relief='flat', bg='#1d4f91', fg='white',
                                  activebackground='#3a73c2', command=self.on_change_name)
        self.name_btn.pack(side='right', padx=5, pady=5)
        ttk.Button(row, text='Save Image', command=self.on_save_plot).pack(side='left', padx=5, pady=5)

    def build_edit_row(self):
        row = ttk.Frame(self.header)
        self.edit_row = row

        cancel = tk.Button(row, text='✕', font=('TkDefaultFont', 18), fg='white', bg='#ee1111',
                           activebackground='#ff1111', relief='flat', command=self.on_cancel)
        cancel.place(relx=0, rely=0, width=BUTTON_WIDTH, relheight=1)
        go = tk.Button(row, text='✓', font=('TkDefaultFont', 18), fg='white', bg='#11ee11',
                       activebackground='#11ff11', relief='flat', command=self.on_go)
        go.place(relx=1, rely=0, x=-BUTTON_WIDTH, width=BUTTON_WIDTH, relheight=1)

        self.name_var = tk.StringVar()
        self.name_entry = ttk.Entry(row, textvariable=self.name_var, justify='center', font=('TkDefaultFont', 16))
        self.name_entry.place(relx=0.5, rely=0.5, anchor='center', relwidth=0.5)
        self.name_entry.bind('<Return>', lambda e: self.on_go())
        self.name_entry.bind('<Escape>', lambda e: self.on_cancel())

    # Chart / error label
    def build_body(self):
        self.canvas = tk.Canvas(self.body, bg=BACKGROUND, highlightthickness=0)
        self.canvas.bind('<Configure>', lambda e: self.draw_chart())
        self.error_label = ttk.Label(self.body, text='Error', padding=5)

    def draw_chart(self):
        self.canvas.delete('all')
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        if width <= 1 or height <= 1:
            return
        for candle in candle_geometry(self.app_state.stock, width, height):
            self.canvas.create_rectangle(*candle.body, fill=candle.color, outline='')
            self.canvas.create_rectangle(*candle.wick, fill=WICK_COLOR, outline='')

    def refresh(self):
        """Sync widgets with self.app_state."""
        state = self.app_state
        if state.editing:
            self.view_row.pack_forget()
            self.edit_row.pack(fill='both', expand=True)
            self.name_var.set(state.stock_name)
            self.name_entry.focus_set()
            self.name_entry.select_range(0, 'end')
        else:
            self.edit_row.pack_forget()
            self.view_row.pack(fill='both', expand=True)
            self.name_btn.config(text=state.stock_name)
            self.meta_label.config(text=state.header_text())

        if state.valid:
            self.error_label.pack_forget()
            self.canvas.pack(fill='both', expand=True)
            self.draw_chart()
        else:
            self.canvas.pack_forget()
            self.error_label.pack(anchor='nw')

    def on_change_name(self):
        self.app_state.begin_edit()
        self.refresh()

    def on_cancel(self):
        self.app_state.cancel_edit()
        self.refresh()

    def on_go(self):
        self.app_state.stock_name = self.name_var.get()
        # blocks the UI thread while the request runs
        self.app_state.commit_edit(self.fetch)
        self.refresh()

    def on_save_plot(self):
        if not self.app_state.valid:
            messagebox.showerror('Error', 'No chart rendered yet')
            return
        file = filedialog.asksaveasfilename(defaultextension='.png', filetypes=[('PNG Image', '*.png')],
                                            initialfile=f'{self.app_state.stock_name}.png')
        if not file:
            return
        try:
            plot_stock(self.app_state.stock, title=f'{self.app_state.stock_name} ({self.app_state.stock.interval})', savefile=file)
        except (RuntimeError, ValueError) as e:
            logger.error('Export failed: %s', e)
            messagebox.showerror('Error', str(e))
            return
        messagebox.showinfo('Saved', f'Figure saved to {file}')


def run_app(state: AppState):
    app = StolckerUI(state)
    app.mainloop()
