import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from app import schemas
from app.api.deps import get_menu_service
from app.core.exceptions import AppError, StoreError
from app.core.logging import logger
from app.services.menu_service import MenuService

router = APIRouter()


@router.get("", response_model=List[schemas.MenuCategory])
async def read_menu(service: MenuService = Depends(get_menu_service)) -> List[schemas.MenuCategory]:
    """
    Cardápio completo: categorias com produtos, grupos de opções e opções,
    todos na ordem de exibição.
    """
    try:
        return await service.get_menu()
    except SQLAlchemyError as e:
        logger.error(f"Erro ao carregar cardápio: {str(e)}")
        raise StoreError("Erro ao carregar cardápio")


# --- Categorias ---
@router.get("/categories", response_model=List[schemas.CategorySummary])
async def read_categories(service: MenuService = Depends(get_menu_service)) -> List[schemas.CategorySummary]:
    """Somente as categorias, sem produtos."""
    try:
        return await service.get_menu()
    except SQLAlchemyError as e:
        logger.error(f"Erro ao listar categorias: {str(e)}")
        raise StoreError("Erro ao listar categorias")


@router.post("/categories", response_model=schemas.MenuCategory, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_in: schemas.CategoryCreate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuCategory:
    try:
        return await service.add_category(category_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar categoria: {str(e)}")
        raise StoreError("Erro ao criar categoria")


@router.put("/categories/{category_id}", response_model=schemas.MenuCategory)
async def update_category(
    category_id: uuid.UUID,
    category_in: schemas.CategoryUpdate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuCategory:
    try:
        return await service.update_category(category_id, category_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao atualizar categoria {category_id}: {str(e)}")
        raise StoreError("Erro ao atualizar categoria")


@router.delete("/categories/{category_id}")
async def delete_category(category_id: uuid.UUID, service: MenuService = Depends(get_menu_service)):
    """Remove a categoria com todos os seus produtos."""
    try:
        await service.delete_category(category_id)
        logger.info(f"Categoria {category_id} removida")
        return {"success": True}
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao remover categoria {category_id}: {str(e)}")
        raise StoreError("Erro ao remover categoria")


# --- Produtos ---
@router.post(
    "/categories/{category_id}/products", response_model=schemas.MenuItem, status_code=status.HTTP_201_CREATED
)
async def create_product(
    category_id: uuid.UUID,
    product_in: schemas.ProductCreate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuItem:
    try:
        product = await service.add_product(category_id, product_in)
        logger.info(f"Produto {product.id} criado na categoria {category_id}")
        return product
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar produto: {str(e)}")
        raise StoreError("Erro ao criar produto")


@router.put("/products/{product_id}", response_model=schemas.MenuItem)
async def update_product(
    product_id: uuid.UUID,
    product_in: schemas.ProductUpdate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuItem:
    try:
        return await service.update_product(product_id, product_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao atualizar produto {product_id}: {str(e)}")
        raise StoreError("Erro ao atualizar produto")


@router.patch("/products/{product_id}/category", response_model=schemas.MenuItem)
async def move_product(
    product_id: uuid.UUID,
    move_in: schemas.ProductMove,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuItem:
    try:
        return await service.move_product(product_id, move_in.category_id)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao mover produto {product_id}: {str(e)}")
        raise StoreError("Erro ao mover produto")


@router.delete("/products/{product_id}")
async def delete_product(product_id: uuid.UUID, service: MenuService = Depends(get_menu_service)):
    try:
        await service.delete_product(product_id)
        logger.info(f"Produto {product_id} removido")
        return {"success": True}
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao remover produto {product_id}: {str(e)}")
        raise StoreError("Erro ao remover produto")


# --- Grupos de opções ---
@router.get("/products/{product_id}/choices", response_model=List[schemas.MenuChoice])
async def read_product_choices(
    product_id: uuid.UUID,
    service: MenuService = Depends(get_menu_service),
) -> List[schemas.MenuChoice]:
    try:
        return await service.get_product_choices(product_id)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao listar opções do produto {product_id}: {str(e)}")
        raise StoreError("Erro ao listar opções")


@router.post(
    "/products/{product_id}/choices", response_model=schemas.MenuChoice, status_code=status.HTTP_201_CREATED
)
async def create_choice_group(
    product_id: uuid.UUID,
    group_in: schemas.ChoiceGroupCreate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuChoice:
    try:
        return await service.add_choice_group(product_id, group_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar grupo de opções: {str(e)}")
        raise StoreError("Erro ao criar grupo de opções")


@router.put("/choices/{group_id}", response_model=schemas.MenuChoice)
async def update_choice_group(
    group_id: uuid.UUID,
    group_in: schemas.ChoiceGroupUpdate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuChoice:
    try:
        return await service.update_choice_group(group_id, group_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao atualizar grupo de opções {group_id}: {str(e)}")
        raise StoreError("Erro ao atualizar grupo de opções")


@router.delete("/choices/{group_id}")
async def delete_choice_group(group_id: uuid.UUID, service: MenuService = Depends(get_menu_service)):
    try:
        await service.delete_choice_group(group_id)
        return {"success": True}
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao remover grupo de opções {group_id}: {str(e)}")
        raise StoreError("Erro ao remover grupo de opções")


# --- Opções ---
@router.post("/choices/{group_id}/options", response_model=schemas.MenuOption, status_code=status.HTTP_201_CREATED)
async def create_choice_option(
    group_id: uuid.UUID,
    option_in: schemas.ChoiceOptionCreate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuOption:
    try:
        return await service.add_choice_option(group_id, option_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar opção: {str(e)}")
        raise StoreError("Erro ao criar opção")


@router.put("/options/{option_id}", response_model=schemas.MenuOption)
async def update_choice_option(
    option_id: uuid.UUID,
    option_in: schemas.ChoiceOptionUpdate,
    service: MenuService = Depends(get_menu_service),
) -> schemas.MenuOption:
    try:
        return await service.update_choice_option(option_id, option_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao atualizar opção {option_id}: {str(e)}")
        raise StoreError("Erro ao atualizar opção")


@router.delete("/options/{option_id}")
async def delete_choice_option(option_id: uuid.UUID, service: MenuService = Depends(get_menu_service)):
    try:
        await service.delete_choice_option(option_id)
        return {"success": True}
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao remover opção {option_id}: {str(e)}")
        raise StoreError("Erro ao remover opção")
