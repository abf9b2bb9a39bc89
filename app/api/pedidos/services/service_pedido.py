from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.cadastros.contracts.cliente_contract import IClienteContract
from app.api.catalogo.contracts.complemento_contract import IComplementoContract
from app.api.catalogo.contracts.produto_contract import IProdutoContract
from app.api.pedidos.models.model_pedido import (
    PedidoModel,
    StatusPedido,
    TipoEntrega,
    MetodoPagamento,
)
from app.api.pedidos.models.model_pedido_historico import TipoOperacaoPedido
from app.api.pedidos.models.model_pedido_item import PedidoItemModel
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.api.pedidos.schemas.schema_pedido import FinalizarPedidoRequest, ItemPersonalizadoRequest
from app.api.pedidos.services.service_item_personalizado import ItemPersonalizadoService
from app.api.pedidos.services.service_pedido_helpers import obter_pedido_ou_404
from app.api.pedidos.services.service_precificacao import calcular_total_pedido
from app.api.pedidos.services.service_status_pedido import StatusPedidoService
from app.api.pedidos.utils.produtos_builder import montar_item_catalogo
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.database_utils import quantizar_dinheiro
from app.utils.logger import logger
from app.utils.telefone import normalizar_telefone


class PedidoService:
    """Criação de pedidos (checkout do cliente e criação pelo admin) e consultas do cliente."""

    def __init__(
        self,
        db: Session,
        *,
        produto_contract: IProdutoContract,
        complemento_contract: IComplementoContract,
        cliente_contract: IClienteContract,
        status_service: StatusPedidoService,
    ):
        self.db = db
        self.repo = PedidoRepository(db)
        self.produto_contract = produto_contract
        self.complemento_contract = complemento_contract
        self.cliente_contract = cliente_contract
        self.status_service = status_service
        self.item_personalizado_service = ItemPersonalizadoService(produto_contract, complemento_contract)

    # ---------------- itens ----------------
    def _montar_itens(self, payload: FinalizarPedidoRequest) -> List[PedidoItemModel]:
        itens: List[PedidoItemModel] = []
        for item_req in payload.itens:
            itens.append(
                montar_item_catalogo(
                    self.produto_contract,
                    self.complemento_contract,
                    produto_id=item_req.produto_id,
                    quantidade=item_req.quantidade,
                    preco=getattr(item_req, "preco", None),
                    complemento_ids=item_req.complemento_ids,
                )
            )
        for item_req in payload.itens_personalizados:
            itens.append(self.item_personalizado_service.resolver(item_req))
        return itens

    def resolver_item_personalizado(self, req: ItemPersonalizadoRequest) -> PedidoItemModel:
        """Prévia do item personalizado (nada é gravado)."""
        return self.item_personalizado_service.resolver(req)

    # ---------------- criação ----------------
    def finalizar_pedido(
        self,
        payload: FinalizarPedidoRequest,
        usuario_id: int,
        *,
        criado_por_id: Optional[int] = None,
    ) -> PedidoModel:
        """
        Cria o pedido em pending_payment.

        - delivery exige endereço do próprio cliente; os dados do endereço são copiados para o pedido
        - retirada não tem endereço nem taxa de entrega
        - pelo menos um item (catálogo ou personalizado)
        - troco só para dinheiro na entrega e nunca menor que o total
        """
        usuario = self.cliente_contract.obter_usuario(usuario_id)
        if not usuario:
            raise NotFoundError(f"Cliente {usuario_id} não encontrado", code="CLIENTE_NAO_ENCONTRADO")

        if not payload.itens and not payload.itens_personalizados:
            raise ValidationError("O pedido precisa ter pelo menos um item", field="itens", code="PEDIDO_SEM_ITENS")

        pedido = PedidoModel(
            usuario_id=usuario.id,
            status=StatusPedido.PENDING_PAYMENT,
            tipo_entrega=payload.tipo_entrega,
            metodo_pagamento=payload.metodo_pagamento,
            observacoes=payload.observacoes,
            total_manual=False,
            versao=1,
        )

        if payload.tipo_entrega == TipoEntrega.DELIVERY:
            if payload.endereco_id is None:
                raise ValidationError("Endereço de entrega é obrigatório para delivery", field="endereco_id")
            endereco = self.cliente_contract.obter_endereco(payload.endereco_id)
            if not endereco or endereco.usuario_id != usuario.id:
                raise NotFoundError(
                    f"Endereço {payload.endereco_id} não encontrado para o cliente",
                    code="ENDERECO_NAO_ENCONTRADO",
                )
            pedido.endereco_id = endereco.id
            pedido.entrega_rua = endereco.rua
            pedido.entrega_numero = endereco.numero
            pedido.entrega_complemento = endereco.complemento
            pedido.entrega_bairro = endereco.bairro
            pedido.entrega_telefone = normalizar_telefone(endereco.telefone or usuario.telefone)
            pedido.taxa_entrega = quantizar_dinheiro(payload.taxa_entrega)
        else:
            pedido.endereco_id = None
            pedido.taxa_entrega = Decimal("0.00")

        itens = self._montar_itens(payload)
        pedido.itens.extend(itens)
        pedido.valor_total = calcular_total_pedido(itens, pedido.tipo_entrega, pedido.taxa_entrega)

        if payload.metodo_pagamento == MetodoPagamento.CASH_ON_DELIVERY and payload.precisa_troco:
            if payload.valor_troco is None:
                raise ValidationError("Informe o valor para troco", field="valor_troco")
            valor_troco = quantizar_dinheiro(payload.valor_troco)
            if valor_troco < pedido.valor_total:
                raise ValidationError(
                    f"Valor para troco ({valor_troco}) é menor que o total do pedido ({pedido.valor_total})",
                    field="valor_troco",
                    code="TROCO_INSUFICIENTE",
                    valor_total=str(pedido.valor_total),
                )
            pedido.precisa_troco = True
            pedido.valor_troco = valor_troco
        else:
            pedido.precisa_troco = False
            pedido.valor_troco = None

        self.repo.add(pedido)
        self.repo.add_historico(
            pedido,
            TipoOperacaoPedido.PEDIDO_CRIADO,
            status_novo=StatusPedido.PENDING_PAYMENT,
            descricao=f"Pedido criado com {len(itens)} item(ns), total {pedido.valor_total}",
            usuario_id=criado_por_id or usuario.id,
        )
        self.repo.commit()
        self.db.refresh(pedido)

        logger.info(
            f"[Pedidos] Pedido {pedido.id} criado: cliente={usuario.id} tipo={pedido.tipo_entrega.value} "
            f"itens={len(itens)} total={pedido.valor_total}"
        )
        return pedido

    # ---------------- cliente ----------------
    def listar_pedidos_cliente(self, usuario_id: int, *, skip: int = 0, limit: int = 50) -> List[PedidoModel]:
        return self.repo.list_pedidos(usuario_id=usuario_id, skip=skip, limit=limit)

    def obter_pedido_cliente(self, pedido_id: int, usuario_id: int) -> PedidoModel:
        pedido = obter_pedido_ou_404(self.repo, pedido_id)
        # Pedido de outro cliente é tratado como inexistente
        if pedido.usuario_id != usuario_id:
            raise NotFoundError(f"Pedido {pedido_id} não encontrado", code="PEDIDO_NAO_ENCONTRADO")
        return pedido

    def cancelar_pedido_cliente(self, pedido_id: int, usuario_id: int) -> PedidoModel:
        pedido = self.obter_pedido_cliente(pedido_id, usuario_id)
        return self.status_service.cancelar(
            pedido_id,
            motivo="Cancelado pelo cliente",
            usuario_id=usuario_id,
            pedido=pedido,
        )
