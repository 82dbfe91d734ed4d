"""Initial storefront schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-18

Schema: storefront.*

- organizations, locations
- user_locations, location_coupons (검색 필터용 연결 테이블)
- location_hours, location_delivery_hours, location_holidays, delivery_time_slots
- location_ratings, mobile_check_ins, review_reports
- users, coupons, products, deals, location_deals
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_WEEKLY_HOURS_TABLES = ("location_hours", "location_delivery_hours")


def upgrade() -> None:
    """Create storefront schema tables.

    Note: IF NOT EXISTS로 기존 테이블 보존
    """
    op.execute("CREATE SCHEMA IF NOT EXISTS storefront")

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.organizations (
            id BIGSERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            pos_id BIGINT,
            allow_off_hours BOOLEAN NOT NULL DEFAULT FALSE,
            max_active_deals INTEGER,
            deleted BOOLEAN NOT NULL DEFAULT FALSE
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_organizations_pos_id
        ON storefront.organizations(pos_id)
    """)

    # ============================================
    # storefront.locations
    # long_lat: point (x=경도, y=위도)
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.locations (
            id BIGSERIAL PRIMARY KEY,
            organization_id BIGINT REFERENCES storefront.organizations(id),
            pos_id BIGINT,
            name VARCHAR(255) NOT NULL,
            description TEXT,
            thumbnail TEXT,
            address_line1 VARCHAR(255),
            address_line2 VARCHAR(255),
            city VARCHAR(128),
            postal_code VARCHAR(32),
            phone_number VARCHAR(32),
            url TEXT,
            message TEXT,
            long_lat POINT,
            timezone VARCHAR(64),
            deleted BOOLEAN NOT NULL DEFAULT FALSE,
            is_delivery_available BOOLEAN NOT NULL DEFAULT FALSE,
            delivery_mile_radius DOUBLE PRECISION,
            delivery_fee DOUBLE PRECISION,
            priority INTEGER,
            allow_off_hours BOOLEAN NOT NULL DEFAULT FALSE,
            created TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            modified TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            created_by BIGINT,
            modified_by BIGINT
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_locations_organization_id
        ON storefront.locations(organization_id)
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.user_locations (
            id BIGSERIAL PRIMARY KEY,
            user_id BIGINT NOT NULL,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            deleted BOOLEAN NOT NULL DEFAULT FALSE,
            CONSTRAINT uq_user_locations_user_location UNIQUE (user_id, location_id)
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_user_locations_location_id
        ON storefront.user_locations(location_id)
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.location_coupons (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            coupon_id BIGINT NOT NULL,
            deleted BOOLEAN NOT NULL DEFAULT FALSE
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_location_coupons_coupon_id
        ON storefront.location_coupons(coupon_id)
    """)

    # ============================================
    # 요일 규칙 (day_of_week: 0=일요일)
    # ============================================
    for table in _WEEKLY_HOURS_TABLES:
        op.execute(f"""
            CREATE TABLE IF NOT EXISTS storefront.{table} (
                id BIGSERIAL PRIMARY KEY,
                location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
                day_of_week INTEGER NOT NULL CHECK (day_of_week BETWEEN 0 AND 6),
                is_open BOOLEAN NOT NULL DEFAULT FALSE,
                start_time TIME,
                end_time TIME,
                CONSTRAINT uq_{table}_day UNIQUE (location_id, day_of_week)
            )
        """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.location_holidays (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            date DATE NOT NULL,
            title VARCHAR(255),
            is_open BOOLEAN NOT NULL DEFAULT FALSE,
            start_time TIME,
            end_time TIME
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_location_holidays_location_date
        ON storefront.location_holidays(location_id, date)
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.delivery_time_slots (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            day VARCHAR(16) NOT NULL,
            day_num INTEGER NOT NULL CHECK (day_num BETWEEN 0 AND 6),
            time_slot VARCHAR(64) NOT NULL,
            max_orders_per_hour INTEGER NOT NULL DEFAULT 0,
            CONSTRAINT uq_delivery_time_slots_slot UNIQUE (location_id, day_num, time_slot)
        )
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.location_ratings (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            user_id BIGINT NOT NULL,
            rating DOUBLE PRECISION NOT NULL CHECK (rating BETWEEN 0 AND 5),
            review TEXT,
            deleted BOOLEAN NOT NULL DEFAULT FALSE,
            created TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            modified TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            created_by BIGINT,
            modified_by BIGINT
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_location_ratings_location_user
        ON storefront.location_ratings(location_id, user_id, created)
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.mobile_check_ins (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            mobile_number VARCHAR(32) NOT NULL,
            created TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            modified TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_mobile_check_ins_mobile_modified
        ON storefront.mobile_check_ins(mobile_number, modified DESC)
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.review_reports (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            review_id BIGINT NOT NULL REFERENCES storefront.location_ratings(id),
            reported_by BIGINT NOT NULL,
            reason TEXT,
            created TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)

    # ============================================
    # 목록 조회용 테이블 (사용자, 쿠폰, 상품, 딜)
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.users (
            id BIGSERIAL PRIMARY KEY,
            first_name VARCHAR(128),
            last_name VARCHAR(128),
            email VARCHAR(255),
            deleted BOOLEAN NOT NULL DEFAULT FALSE
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.coupons (
            id BIGSERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            code VARCHAR(64),
            description TEXT,
            start_date DATE,
            end_date DATE,
            deleted BOOLEAN NOT NULL DEFAULT FALSE
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.products (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            name VARCHAR(255) NOT NULL,
            description TEXT,
            category VARCHAR(64),
            subcategory VARCHAR(64),
            is_in_stock BOOLEAN NOT NULL DEFAULT TRUE,
            hidden BOOLEAN NOT NULL DEFAULT FALSE,
            strain_id BIGINT,
            strain_name VARCHAR(255),
            deleted BOOLEAN NOT NULL DEFAULT FALSE,
            created TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            modified TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            created_by BIGINT,
            modified_by BIGINT
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_products_location_category
        ON storefront.products(location_id, category)
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.deals (
            id BIGSERIAL PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            timezone VARCHAR(64),
            end_date DATE,
            deleted BOOLEAN NOT NULL DEFAULT FALSE
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.location_deals (
            id BIGSERIAL PRIMARY KEY,
            location_id BIGINT NOT NULL REFERENCES storefront.locations(id),
            deal_id BIGINT NOT NULL REFERENCES storefront.deals(id),
            deleted BOOLEAN NOT NULL DEFAULT FALSE
        )
    """)


def downgrade() -> None:
    """Drop storefront schema.

    주의: 모든 데이터가 삭제됩니다!
    """
    op.execute("DROP TABLE IF EXISTS storefront.location_deals CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.deals CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.products CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.coupons CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.users CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.review_reports CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.mobile_check_ins CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.location_ratings CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.delivery_time_slots CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.location_holidays CASCADE")
    for table in reversed(_WEEKLY_HOURS_TABLES):
        op.execute(f"DROP TABLE IF EXISTS storefront.{table} CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.location_coupons CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.user_locations CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.locations CASCADE")
    op.execute("DROP TABLE IF EXISTS storefront.organizations CASCADE")
    op.execute("DROP SCHEMA IF EXISTS storefront CASCADE")
