"""
시뮬레이션 환경 설정과 관련된 모든 상수 및 구성 값을 관리하는 모듈입니다.
"""
import string

# 시뮬레이션 기본 설정
SEED = 42                   # 난수 생성기 시드
NUM_SECONDS_IN_1H = 3600    # 1시간 (초 단위)
SIMULATION_DURATION = 24 * NUM_SECONDS_IN_1H  # 24시간 (초 단위)

# 차량 설정
PLATE_NUM_LENGTH = 3        # 차량 번호 길이
PLATE_ALPHABET = string.ascii_uppercase + string.digits  # 차량 번호에 쓰이는 문자

# 주차 설정
MAX_PARKING_DURATION = 8 * NUM_SECONDS_IN_1H  # 최대 주차 가능 시간 (초)
DEFAULT_LOT_CAPACITY = 50   # 기본 주차면 수
DEFAULT_ARRIVAL_RATE = 3    # 기본 시간당 도착 차량 수

# 기록 설정
SNAPSHOT_INTERVAL = 60      # 점유 현황 기록 간격 (초)

# 주차면 수 최적화 설정
NUM_RUNS = 10               # 주차면 수별 시뮬레이션 반복 횟수
QUEUE_THRESHOLD = 5.0       # 허용 가능한 평균 대기열 길이
