"""Location Listings Application Layer.

위치에 연결된 쿠폰, 할당된 사용자, 조직별 활성 딜 집계의 읽기 전용 목록입니다.
"""
