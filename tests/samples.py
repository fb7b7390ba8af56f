# (r, g, b) bytes -> integer (h, s%, l%)
samples_rgb_hsl = {
    (255, 0, 0): (0, 100, 50),
    (0, 255, 0): (120, 100, 50),
    (0, 0, 255): (240, 100, 50),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (128, 128, 128): (0, 0, 50),
    (255, 165, 0): (39, 100, 50),
    (138, 43, 226): (271, 76, 53),
}

# integer (h, s%, l%) -> (r, g, b) bytes, exact
samples_hsl_rgb = {
    (0, 100, 50): (255, 0, 0),
    (120, 100, 50): (0, 255, 0),
    (240, 100, 50): (0, 0, 255),
    (60, 100, 50): (255, 255, 0),
    (0, 0, 100): (255, 255, 255),
    (0, 0, 0): (0, 0, 0),
    (0, 0, 50): (128, 128, 128),
}

# (r, g, b) bytes -> CMYK percentages
samples_rgb_cmyk = {
    (0, 0, 0): (0, 0, 0, 100),
    (255, 255, 255): (0, 0, 0, 0),
    (255, 0, 0): (0, 100, 100, 0),
    (0, 128, 255): (100, 50, 0, 0),
}

# (r, g, b) bytes -> CIE Lab (D65), to two decimals
samples_rgb_lab = {
    (255, 255, 255): (100.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (53.24, 80.09, 67.20),
    (0, 255, 0): (87.73, -86.18, 83.18),
    (0, 0, 255): (32.30, 79.19, -107.86),
}

# literal -> canonical RGBA
samples_literals = {
    "#FF0000": (255, 0, 0, 1.0),
    "#f00": (255, 0, 0, 1.0),
    "00ff00": (0, 255, 0, 1.0),
    "#0000ff80": (0, 0, 255, 128 / 255),
    "#f008": (255, 0, 0, 136 / 255),
    "rgb(10, 20, 30)": (10, 20, 30, 1.0),
    "RGB( 10 ,20,30 )": (10, 20, 30, 1.0),
    "rgba(255, 0, 0, 0.5)": (255, 0, 0, 0.5),
    "rgba(255,0,0,.25)": (255, 0, 0, 0.25),
    "hsl(0, 100%, 50%)": (255, 0, 0, 1.0),
    "hsla(240, 100%, 50%, 1)": (0, 0, 255, 1.0),
    "red": (255, 0, 0, 1.0),
    "  Spring Green ": (0, 255, 127, 1.0),
    "grey": (128, 128, 128, 1.0),
}

invalid_literals = [
    "",
    "   ",
    "#12345",
    "#ggg",
    "rgb(1, 2)",
    "rgba(1, 2, 3)",
    "rgba(1, 2, 3, 1.5)",
    "hsl(0, 100, 50)",
    "blurple",
]
