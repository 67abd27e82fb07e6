#!/usr/bin/env python3
"""
showcase 패키지 기본 사용 예제

Markdown 본문을 렌더링하고 목차를 만든 뒤, 헤드리스 뷰포트로
스크롤에 따른 활성 항목 추적을 확인합니다.
"""

from showcase import (
    MarkdownRenderer,
    TableOfContents,
    Presentation,
    StaticViewport,
    build_outline,
    format_outline,
)

SAMPLE = """
# Demo Project

## Intro

Some introduction.

### Background

Why this exists.

## Results

### Setup

### Setup

## API & Usage!
"""


def main():
    """기본 사용 예제"""
    print("📚 showcase 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 본문 렌더링
    rendered = MarkdownRenderer().render(SAMPLE)
    print(f"✅ {len(rendered.headings)}개 헤딩 추출")
    for entry in rendered.headings:
        print(f"   - h{entry.level} {entry.text!r} -> #{entry.id}")

    # 2. 목차 출력
    print("\n📑 목차:")
    print(format_outline(build_outline(rendered.headings)))

    # 3. 스크롤 추적 (앵커 위치는 임의 값)
    positions = {
        entry.id: 400.0 * index for index, entry in enumerate(rendered.headings)
    }
    viewport = StaticViewport(positions)
    toc = TableOfContents(rendered.headings, Presentation.INLINE, offset=100)
    toc.mount(viewport)

    print("\n🔍 스크롤 추적:")
    for y in (0, 450, 1300, 2000):
        viewport.scroll(y)
        viewport.run_frame()
        active = toc.active.id if toc.active else "없음"
        print(f"   scroll={y:>5} -> 활성 항목: {active}")

    # 4. 항목 선택
    selected = toc.select("results")
    print(f"\n👉 선택: {selected.text} (상태: {toc.state.value})")
    print(format_outline(toc.outline, active_id=toc.active.id))

    toc.unmount()
    print(f"\n🧹 해제 후 남은 리스너: {viewport.listener_count}")


if __name__ == "__main__":
    main()
