KIND_COLORS = {
    "ui": "#2563eb",
    "api": "#0ea5e9",
    "db": "#059669",
    "auth": "#f59e0b",
    "queue": "#a855f7",
    "cache": "#ef4444",
    "ai": "#14b8a6",
    "default": "#64748b",
}

NODE_STYLE = {
    "radius": 28,
    "hit_radius": 30,
}

EDGE_STYLE = {
    "color": "#94a3b8",
    "width": 1.5,
    "inset": 32,          # edge ends stop this far from node centers
    "arrow_size": 7,
}

LABEL_STYLE = {
    "font_family": "ui-sans-serif, system-ui, -apple-system, Segoe UI",
    "font_size": 11,
    "char_width": 6.2,    # rough advance per char at font_size
    "pad_x": 8,
    "height": 18,
    "min_width": 36,
    "gap": 10,            # between circle top and label box
    "corner": 6,
    "background": "rgba(255,255,255,0.9)",
    "color": "#0f172a",
}


def color_for(kind: str) -> str:
    return KIND_COLORS.get(kind, KIND_COLORS["default"])
