"""
로깅 설정 모듈
모든 디버그 출력을 통합 관리
"""
import logging
import sys

LOG_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

def setup_logger(level=logging.INFO):
    """로거 설정"""
    root_logger = logging.getLogger()

    # 이미 핸들러가 있으면 중복 추가 방지
    if root_logger.handlers:
        return root_logger

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.addHandler(console_handler)

    return root_logger

# 모듈별 로거 생성 함수
def get_logger(name):
    """모듈별 로거 가져오기"""
    return logging.getLogger(name)
