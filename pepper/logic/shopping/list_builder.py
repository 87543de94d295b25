"""Shopping list builder.

Provides consolidate(recipe_ids, ingredient_fetcher) which turns the ingredient
rows of every planned recipe into one deduplicated, categorized list.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from pepper.domain.IngredientRow import IngredientRow
from pepper.domain.ShoppingItem import ShoppingItem
from pepper.logic.shopping.categories import categorize
from pepper.logic.shopping.ingredient_text import clean_amount, clean_name, normalize_key

logger = logging.getLogger(__name__)

IngredientFetcher = Callable[[int], Sequence[IngredientRow]]


def _fetch_sequential(recipe_ids: List[int], fetcher: IngredientFetcher) -> List[Optional[Sequence[IngredientRow]]]:
    results = []
    for recipe_id in recipe_ids:
        try:
            results.append(fetcher(recipe_id))
        except Exception as e:
            logger.warning("Skipping recipe %s: ingredient fetch failed: %s", recipe_id, e)
            results.append(None)
    return results


def _fetch_pooled(recipe_ids: List[int], fetcher: IngredientFetcher, max_workers: int,
                  timeout: Optional[float]) -> List[Optional[Sequence[IngredientRow]]]:
    # One deadline for the whole batch, counted from submission
    executor = ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(recipe_ids))))
    try:
        futures = [executor.submit(fetcher, recipe_id) for recipe_id in recipe_ids]
        done, _ = wait(futures, timeout=timeout)
        # Results are collected in plan order so the merge below never sees a reordering
        results = []
        for recipe_id, future in zip(recipe_ids, futures):
            if future not in done:
                logger.warning("Skipping recipe %s: ingredient fetch timed out after %ss", recipe_id, timeout)
                future.cancel()
                results.append(None)
                continue
            try:
                results.append(future.result())
            except Exception as e:
                logger.warning("Skipping recipe %s: ingredient fetch failed: %s", recipe_id, e)
                results.append(None)
        return results
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def consolidate(recipe_ids: Iterable[int], ingredient_fetcher: IngredientFetcher, *,
                max_workers: int = 1, timeout: Optional[float] = None) -> List[ShoppingItem]:
    """Build the consolidated shopping list for a meal plan.

    Args:
        recipe_ids: Recipe ids in plan order; earlier recipes win item position.
        ingredient_fetcher: Callable returning the IngredientRow list of one recipe.
            A fetch that raises (or times out) is logged and that recipe is skipped.
        max_workers: When > 1, fetches overlap on a thread pool.
        timeout: Seconds allowed for the fetches, counted from submission. When
            set, fetches always run on a pool (one worker if max_workers is 1)
            so a hung fetch cannot block the caller.

    Returns:
        ShoppingItem list in first-seen order. Rows whose normalized key was
        already seen add " + <amount>" to the existing item.
    """
    ids = list(recipe_ids)
    if not ids:
        return []

    if timeout is not None or (max_workers > 1 and len(ids) > 1):
        fetched = _fetch_pooled(ids, ingredient_fetcher, max_workers, timeout)
    else:
        fetched = _fetch_sequential(ids, ingredient_fetcher)

    items: Dict[str, ShoppingItem] = {}
    for recipe_id, rows in zip(ids, fetched):
        if rows is None:
            continue
        for row in rows:
            name = clean_name(row.name)
            # Rows without letters share the empty key so their amounts are kept
            key = normalize_key(name)
            amount = clean_amount(row.raw, row.qty, row.unit)
            existing = items.get(key)
            if existing is None:
                items[key] = ShoppingItem(name, amount, categorize(name))
            else:
                existing.append_amount(amount)

    logger.debug("Consolidated %d recipes into %d shopping items", len(ids), len(items))
    return list(items.values())


__all__ = ['consolidate', 'IngredientFetcher']
