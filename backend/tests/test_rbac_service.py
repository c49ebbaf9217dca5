"""
Tests para el control de acceso por rol.
"""
import pytest

from app.core.contexto import ContextoSesion
from app.core.rbac_service import RUTAS_PERMISOS, rbac_service
from app.models.usuario import PermisoEnum, RolEnum, UsuarioSesion


TODOS_LOS_PERMISOS = {permiso.value for permiso in PermisoEnum}


class TestNormalizarRol:
    """Tests para normalizar_rol."""

    @pytest.mark.parametrize("rol, esperado", [
        ("admin", RolEnum.ADMIN),
        ("ADMIN", RolEnum.ADMIN),
        (" Doctor ", RolEnum.DOCTOR),
        ("staff", RolEnum.STAFF),
        (RolEnum.DOCTOR, RolEnum.DOCTOR),
    ])
    def test_roles_conocidos(self, rol, esperado):
        assert rbac_service.normalizar_rol(rol) == esperado

    @pytest.mark.parametrize("rol", [None, "", "superuser", "recepcion", 42])
    def test_rol_desconocido_cae_a_staff(self, rol):
        """Test rol ausente o desconocido usa el de menor privilegio."""
        assert rbac_service.normalizar_rol(rol) == RolEnum.STAFF


class TestResolverPermisos:
    """Tests para resolver_permisos."""

    @pytest.mark.parametrize("rol", ["admin", "doctor", "staff", None, "otro"])
    def test_forma_fija(self, rol):
        """Test todas las capacidades presentes, siempre booleanas."""
        permisos = rbac_service.resolver_permisos(rol)

        assert set(permisos) == TODOS_LOS_PERMISOS
        assert all(isinstance(valor, bool) for valor in permisos.values())

    def test_admin_tiene_todo(self):
        assert all(rbac_service.resolver_permisos("admin").values())

    def test_doctor_sin_gestion_de_usuarios(self):
        permisos = rbac_service.resolver_permisos("doctor")

        assert permisos["canManageUsers"] is False
        assert permisos["canManageDoctores"] is True
        assert sum(permisos.values()) == len(TODOS_LOS_PERMISOS) - 1

    def test_staff(self):
        permisos = rbac_service.resolver_permisos("staff")

        assert permisos["canViewPatients"] is True
        assert permisos["canViewPatientPreview"] is True
        assert permisos["canViewCompletedTreatments"] is True
        assert permisos["canViewCalendar"] is True
        assert permisos["canViewMenuNavegacion"] is True
        assert permisos["canManageDoctores"] is True

        assert permisos["canViewDashboard"] is False
        assert permisos["canCreatePatients"] is False
        assert permisos["canViewOdontogram"] is False
        assert permisos["canViewTreatments"] is False
        assert permisos["canViewConsentimientos"] is False
        assert permisos["canManageUsers"] is False

    def test_rol_desconocido_igual_a_staff(self):
        assert rbac_service.resolver_permisos("superuser") == rbac_service.resolver_permisos("staff")
        assert rbac_service.resolver_permisos(None) == rbac_service.resolver_permisos("staff")

    def test_tiene_permiso(self):
        assert rbac_service.tiene_permiso("doctor", PermisoEnum.ODONTOGRAMA_VER) is True
        assert rbac_service.tiene_permiso("staff", PermisoEnum.ODONTOGRAMA_VER) is False


class TestAccesoRutas:
    """Tests para puede_acceder_ruta."""

    @pytest.mark.parametrize("ruta", ["/dashboard", "/admin", "/admin/users", "/no-existe", "/account"])
    def test_admin_accede_a_todo(self, ruta):
        """Test admin accede incluso a rutas no mapeadas."""
        assert rbac_service.puede_acceder_ruta("admin", ruta) is True

    def test_coincidencia_exacta(self):
        assert rbac_service.puede_acceder_ruta("staff", "/pacientes") is True
        assert rbac_service.puede_acceder_ruta("staff", "/dashboard") is False

    def test_coincidencia_por_prefijo(self):
        """Test subrutas heredan el permiso de su prefijo."""
        assert rbac_service.puede_acceder_ruta("staff", "/pacientes/123") is True
        assert rbac_service.puede_acceder_ruta("staff", "/patient-form/123") is False
        assert rbac_service.puede_acceder_ruta("doctor", "/patient-form/123") is True

    def test_prefijo_respeta_separador(self):
        """Test /admin no cubre /administration."""
        assert rbac_service.permiso_para_ruta("/administration") is None
        assert rbac_service.puede_acceder_ruta("doctor", "/administration") is False
        assert rbac_service.puede_acceder_ruta("doctor", "/admin/settings") is False

    def test_rutas_con_prefijo_comun(self):
        """Test /tratamientos no captura /tratamientos-completados."""
        assert rbac_service.puede_acceder_ruta("staff", "/tratamientos") is False
        assert rbac_service.puede_acceder_ruta("staff", "/tratamientos-completados") is True
        assert rbac_service.puede_acceder_ruta("staff", "/tratamientos-completados/9") is True

    @pytest.mark.parametrize("ruta", ["/account", "/patient-records", "", "pacientes"])
    def test_ruta_no_mapeada_se_niega(self, ruta):
        assert rbac_service.puede_acceder_ruta("doctor", ruta) is False

    def test_gestion_de_usuarios(self):
        assert rbac_service.puede_acceder_ruta("doctor", "/admin/users") is False
        assert rbac_service.puede_acceder_ruta("staff", "/admin") is False

    def test_rol_desconocido_se_trata_como_staff(self):
        assert rbac_service.puede_acceder_ruta("superuser", "/calendario") is True
        assert rbac_service.puede_acceder_ruta("superuser", "/odontogram") is False

    def test_tabla_de_rutas_sin_duplicados(self):
        rutas = [ruta for ruta, _ in RUTAS_PERMISOS]
        assert len(rutas) == len(set(rutas))


class TestUsuarioSesion:
    """Tests para los permisos del usuario de sesión."""

    def test_permisos_del_usuario(self):
        usuario = UsuarioSesion(id="u1", rol=RolEnum.DOCTOR)

        assert usuario.tiene_permiso(PermisoEnum.PACIENTE_CREAR)
        assert usuario.tiene_todos_permisos([PermisoEnum.PACIENTE_VER, PermisoEnum.ODONTOGRAMA_VER])
        assert not usuario.tiene_todos_permisos([PermisoEnum.USUARIOS_GESTIONAR])


class TestContextoSesion:
    """Tests para el contexto de sesión."""

    def test_desde_usuario(self):
        contexto = ContextoSesion.desde_usuario(UsuarioSesion(id="u1", rol=RolEnum.STAFF))

        assert contexto.rol == RolEnum.STAFF
        assert contexto.tema == "light"
        assert contexto.tiene_permiso(PermisoEnum.CALENDARIO_VER)
        assert not contexto.tiene_permiso(PermisoEnum.DASHBOARD_VER)
        assert contexto.puede_acceder_ruta("/calendario")

    def test_tutoriales(self):
        contexto = ContextoSesion.desde_usuario(UsuarioSesion(id="u1"), tutoriales_vistos=["busqueda"])

        assert contexto.tutorial_visto("busqueda")
        assert not contexto.tutorial_visto("odontograma")

        contexto.marcar_tutorial_visto("odontograma")
        assert contexto.tutorial_visto("odontograma")

    def test_contextos_independientes(self):
        """Test cada sesión tiene su propio estado."""
        a = ContextoSesion.desde_usuario(UsuarioSesion(id="a"))
        b = ContextoSesion.desde_usuario(UsuarioSesion(id="b"))

        a.marcar_tutorial_visto("busqueda")

        assert not b.tutorial_visto("busqueda")

    def test_tema_invalido(self):
        contexto = ContextoSesion.desde_usuario(UsuarioSesion(id="u1"), tema="neon")
        assert contexto.tema == "light"
