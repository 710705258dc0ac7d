# tests/utils/__init__.py

"""
유틸리티 모듈(파일 저장 등)에 대한 단위 테스트 패키지입니다.
"""
