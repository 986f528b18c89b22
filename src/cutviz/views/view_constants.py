WINDOW_TITLE = "Triangle Cut Viewer"
WINDOW_SIZE = (1200, 800)
WINDOW_MIN_SIZE = (640, 480)
