from __future__ import annotations

# Последовательность широтных поясов с юга на север (буквы I и O пропущены)
LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWX'

# Номера долготных зон UTM
MIN_LONGITUDE_BAND = 1
MAX_LONGITUDE_BAND = 60

# Ширина долготной зоны (градусы)
LONGITUDE_BAND_WIDTH_DEG = 6

# Западная граница первой зоны (градусы)
LONGITUDE_ORIGIN_DEG = -180

# Высота широтного пояса (градусы); пояс X вытянут до 84° с.ш.
LATITUDE_BAND_HEIGHT_DEG = 8
LATITUDE_BAND_X_HEIGHT_DEG = 12

# Границы покрытия буквенных поясов (градусы)
LATITUDE_BANDS_SOUTH_DEG = -80
LATITUDE_BANDS_NORTH_DEG = 84

# Допустимые географические границы (градусы)
LNG_MIN_DEG = -180
LNG_MAX_DEG = 180
LAT_MIN_DEG = -90
LAT_MAX_DEG = 90

# Исключения из регулярной сетки: (зона, пояс) -> (сдвиг min, сдвиг max) по долготе
GZD_OVERLAYS: dict[tuple[int, str], tuple[int, int]] = {
    # Норвегия: 31V сужена, 32V расширена на запад
    (31, 'V'): (0, -3),
    (32, 'V'): (-3, 0),
    # Шпицберген
    (31, 'X'): (0, 3),
    (33, 'X'): (-3, 3),
    (35, 'X'): (-3, 3),
    (37, 'X'): (-3, 0),
}

# Зоны, поглощённые соседями около Шпицбергена
GZD_MISSING: frozenset[tuple[int, str]] = frozenset({(32, 'X'), (34, 'X'), (36, 'X')})

# Полярные области: буква -> (lng_min, lng_max, lat_min, lat_max), порядок вывода A, B, X, Y
POLAR_REGIONS: dict[str, tuple[int, int, int, int]] = {
    'A': (-180, 0, -90, -80),
    'B': (0, 180, -90, -80),
    'X': (-180, 0, 84, 90),
    'Y': (0, 180, 84, 90),
}

# Ожидаемое число зон в полной сетке
GZD_TOTAL_COUNT = (
    (MAX_LONGITUDE_BAND - MIN_LONGITUDE_BAND + 1) * len(LATITUDE_BANDS)
    - len(GZD_MISSING)
    + len(POLAR_REGIONS)
)

# Имя приложения для пользовательских каталогов
APP_DIR_NAME = 'GZDMapper'

# Формат записей журнала
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Уровень журнала по умолчанию
DEFAULT_LOG_LEVEL = 'INFO'

# Отступ JSON по умолчанию и допустимый максимум
DEFAULT_GEOJSON_INDENT = 2
MAX_GEOJSON_INDENT = 8

# Коды завершения CLI
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
